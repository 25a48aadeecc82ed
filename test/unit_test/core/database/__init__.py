"""Unit tests for the database layer.

Entity tests cover column defaults, constraints and cascade rules; repository
tests cover the query logic. Everything runs against in-memory SQLite.
"""
