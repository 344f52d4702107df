"""Geo Attendance Bot package.

This package is organized by feature modules (geofence, employees, attendance,
messaging, reports) with thin Flask controllers on top of service/repository
layers. Chat backends are adapters around a single attendance resolver.
"""
