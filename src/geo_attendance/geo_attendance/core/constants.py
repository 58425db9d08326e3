"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

EARTH_RADIUS_METERS = 6_371_000

# Used when no office_location row has been saved yet.
DEFAULT_OFFICE_LATITUDE = -7.446754760104717
DEFAULT_OFFICE_LONGITUDE = 109.24140415854745
DEFAULT_OFFICE_RADIUS_METERS = 100.0

TIME_OF_DAY_FORMAT = "%H:%M:%S"
