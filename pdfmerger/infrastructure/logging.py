"""Console and transcript logging for merge runs.

Every module logs through a child of the ``pdfmerger`` logger. A real merge
also writes ``<output_dir>/log.txt``: the merge order, skipped inputs and the
outcome of each project, for the most recent merge only.
"""

from __future__ import annotations

import logging
from pathlib import Path

_ROOT = "pdfmerger"
_CONSOLE_FORMAT = "[pdfmerger] %(levelname)s %(message)s"
_TRANSCRIPT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_logger(name: str | None = None) -> logging.Logger:
    return logging.getLogger(f"{_ROOT}.{name}" if name else _ROOT)


def configure_logging(*, verbose: bool = False, log_file: Path | None = None) -> logging.Logger:
    """Attach the console handler and, when ``log_file`` is given, the transcript.

    The transcript is opened in write mode, so it is replaced at the start of
    each merge. Raises ``OSError`` if it cannot be opened; nothing is left
    attached in that case.
    """
    shutdown_logging()

    level = logging.DEBUG if verbose else logging.INFO
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    handlers[0].setFormatter(logging.Formatter(_CONSOLE_FORMAT))
    if log_file is not None:
        transcript = logging.FileHandler(log_file, mode="w", encoding="utf-8")
        transcript.setFormatter(logging.Formatter(_TRANSCRIPT_FORMAT))
        handlers.append(transcript)

    logger = logging.getLogger(_ROOT)
    logger.setLevel(level)
    logger.propagate = False
    for handler in handlers:
        handler.setLevel(level)
        logger.addHandler(handler)
    return logger


def shutdown_logging() -> None:
    """Close the run's handlers and hand records back to the root logger."""
    logger = logging.getLogger(_ROOT)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True


__all__ = ["configure_logging", "get_logger", "shutdown_logging"]
