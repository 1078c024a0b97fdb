"""Persistence-facing abstractions."""
