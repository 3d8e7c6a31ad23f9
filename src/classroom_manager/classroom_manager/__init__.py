"""Classroom Manager package.

This package is organized by feature modules (classes, students, sessions,
attendance, grades, reports) with a thin Flask controller layer over
service/repository layers.
"""
