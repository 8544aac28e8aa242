"""UniConnect portal backend.

This package is organized by feature modules (branches, students, teachers,
marks, attendance, events, users) with a thin Flask controller layer on top of
service/repository layers.
"""
