"""Diagnostics and serialization helpers."""
