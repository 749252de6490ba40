"""Shared helpers: the error taxonomy and logging setup."""
