"""Logging helpers package initializer."""

__all__ = [
    "logging_utils",
]
