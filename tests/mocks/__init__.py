"""
Centralized mock objects for testing.

This package provides reusable mock factories for the catalog
repositories, so command and page tests run without a database.
"""
