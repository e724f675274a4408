"""Shared helpers: logging setup and datetime utilities. No storage logic."""
