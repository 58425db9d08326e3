class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class AuthorizationError(DomainError):
    """Raised when a user lacks permission for an action."""


class ConfigurationError(DomainError):
    """Raised when office/schedule configuration required for an action is missing."""


class StorageError(Exception):
    """Raised when the record store fails. Never a business rejection."""


class DuplicateRecordError(StorageError):
    """Raised when the store refuses a second record for the same (user, date)."""
