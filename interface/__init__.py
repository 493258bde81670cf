"""Interface package initializer.

Command-line parsing, plain-text rendering and JSON storage for the
calculator engines.
"""

__all__ = [
    "cli",
    "persistence",
    "render",
]
