"""Matching — glob and regex evaluation of route ids.

Patterns are compiled once with the filter configuration; every
decision afterwards is a lookup against the compiled sets.
"""
