"""Converter base class, its errors and normalization helpers."""
