"""Utility helpers for listing compliance."""

__all__: list[str] = []
