"""Expense Log API: a small REST service for recording personal expenses."""

__version__ = "0.1.0"
