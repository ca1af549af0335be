"""Attendance Points package.

Organized by feature modules (employees, incidents, backup, ...) around a
pure policy engine, with a thin Flask controller layer on top of the
service layer.
"""
