"""Attendance Payroll package.

Pure computation over attendance snapshots, organized by feature modules
(attendance, leaves, payroll, ...) with a thin Flask JSON controller layer.
"""
