"""Geo Attendance package.

Employees check in/out from the browser; the server validates every attempt
against the office geofence and the daily attendance schedule. The package is
organized by feature modules (geo, office, schedules, attendance, reports) with
a thin Flask controller layer over service/repository layers.
"""
