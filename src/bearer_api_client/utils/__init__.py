"""Utility helpers: JSON codec, logging setup and the HTTP layer."""
