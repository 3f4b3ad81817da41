"""Utility helpers for md2adf."""
