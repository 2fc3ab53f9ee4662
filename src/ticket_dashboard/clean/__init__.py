"""Cleaning utilities for row values.

Provides helpers to detect blank cells, coerce loosely typed cell values to
text, and standardize date cells to a calendar day.
"""
