"""Routing — classify route files and derive route ids.

Knows the flat (``pages/``) and nested (``app/``) conventions; performs
no filesystem access.
"""
