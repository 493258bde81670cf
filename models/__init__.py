"""Models package initializer.

Mark `models` as a package so imports and type-checking resolve to
`models.*` module names consistently.
"""

__all__ = [
    "base",
    "chemistry",
    "filling",
    "protocol",
    "recipe",
    "scaling",
    "tempering",
]
