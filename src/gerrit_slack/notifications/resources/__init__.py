"""Packaged message templates."""
