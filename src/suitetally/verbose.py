"""Debug logging for the suitetally CLI."""

from __future__ import annotations

import logging
import sys
from pathlib import Path


def setup_logger(
    debug_file: Path | None = None,
    verbose: bool = False,
    logger_name: str = "suitetally",
) -> logging.Logger:
    """Route suitetally's debug records to the places the CLI asked for.

    ``render --debug-log PATH`` appends to ``PATH`` and ``render --verbose``
    echoes to stderr; both may be given. The records come from the module
    loggers under "suitetally": suite outcome transitions logged by
    ``TestResult.add_result``, dropped stack traces, and report writes.
    With neither option the logger only gets a ``NullHandler``.

    Calling it again replaces the handlers from the previous call.
    """
    logger = logging.getLogger(logger_name)

    # drop handlers from a previous call
    logger.handlers.clear()

    logger.disabled = False
    logger.setLevel(logging.DEBUG)

    formatter = logging.Formatter(
        fmt="[%(asctime)s] %(message)s", datefmt="%Y-%m-%dT%H:%M:%S"
    )

    if debug_file is not None:
        debug_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(debug_file, mode="a")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    if verbose:
        stderr_handler = logging.StreamHandler(sys.stderr)
        stderr_handler.setLevel(logging.DEBUG)
        stderr_handler.setFormatter(formatter)
        logger.addHandler(stderr_handler)

    if not logger.handlers:
        logger.addHandler(logging.NullHandler())

    return logger
