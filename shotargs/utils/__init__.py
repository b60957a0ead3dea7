"""Validation and filename helpers for option values."""
