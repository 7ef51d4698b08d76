"""Shift Roster package.

Organized by feature modules (employees, credentials, shift entries,
dashboards) with a thin Flask controller layer over service and
repository layers.
"""
