"""Logging configuration helpers for the CLI and tests.

Exports
-------
LOG_FORMAT
verbosity_to_level
setup_logging
"""

import logging

LOG_FORMAT = "%(asctime)s %(levelname).1s %(name)s: %(message)s"
LOG_DATEFMT = "%H:%M:%S"

# -v count -> level; anything past the end is DEBUG
_LEVELS = (logging.WARNING, logging.INFO, logging.DEBUG)


def verbosity_to_level(verbosity: int) -> int:
    """Map a count of ``-v`` flags to a logging level."""
    return _LEVELS[max(0, min(verbosity, len(_LEVELS) - 1))]


def setup_logging(
    verbosity: int,
    log_file: str | None = None,
) -> int:
    """Configure root logging for a calculator run.

    Parameters
    ----------
    verbosity : int
        Count of ``-v`` flags; 0 shows warnings (invalid recipes, unsafe
        tempering), 1 adds saved/deleted records, 2+ adds engine internals.
    log_file : str or None
        Path to a log file to write to, or ``None`` to log to stderr only.

    Returns
    -------
    int
        The level that was applied.
    """
    level = verbosity_to_level(verbosity)

    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if log_file:
        handlers.append(
            logging.FileHandler(
                log_file,
                encoding="utf-8",
            )
        )
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt=LOG_DATEFMT,
        handlers=handlers,
        force=True,  # reset prior basicConfig runs
    )
    return level
