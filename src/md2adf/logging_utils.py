"""Logging helpers for applications embedding md2adf.

The library only emits records through module-level loggers under the
``md2adf`` namespace and never installs handlers on import. Applications that
want to see conversion diagnostics call :func:`configure_logging`.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

LIBRARY_LOGGER_NAME = "md2adf"


def resolve_log_level(log_level: int | str) -> int:
    """Turn a numeric level or level name into a logging level.

    Unknown names resolve to ``logging.INFO``.
    """
    if isinstance(log_level, int):
        return log_level
    return getattr(logging, str(log_level).upper(), logging.INFO)


def configure_logging(
    log_level: int | str,
    log_file: Optional[str] = None,
    trace_mode: bool = False,
    propagate: bool = False,
) -> logging.Logger:
    """Attach handlers to the ``md2adf`` logger.

    Parameters
    ----------
    log_level : int | str
        Numeric logging level or string name (e.g., "DEBUG").
    log_file : str, optional
        Optional path to a log file for teeing log output.
    trace_mode : bool, default False
        When true, emit timestamps and logger names for debugging traces.
    propagate : bool, default False
        Whether records should also reach handlers on the root logger.

    Returns
    -------
    logging.Logger
        The configured ``md2adf`` logger.

    """
    resolved_level = resolve_log_level(log_level)

    library_logger = logging.getLogger(LIBRARY_LOGGER_NAME)
    library_logger.setLevel(resolved_level)
    library_logger.propagate = propagate
    for handler in list(library_logger.handlers):
        library_logger.removeHandler(handler)
        handler.close()

    format_str = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s" if trace_mode else "%(levelname)s: %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S" if trace_mode else None
    formatter = logging.Formatter(format_str, datefmt=date_format)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(resolved_level)
    console_handler.setFormatter(formatter)
    library_logger.addHandler(console_handler)

    if log_file:
        try:
            file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        except OSError as exc:  # pragma: no cover - handled at runtime
            library_logger.warning("Could not create log file %s: %s", log_file, exc)
        else:
            file_handler.setLevel(resolved_level)
            file_handler.setFormatter(formatter)
            library_logger.addHandler(file_handler)
            library_logger.info("Logging to file: %s", log_file)

    return library_logger


__all__ = ["LIBRARY_LOGGER_NAME", "configure_logging", "resolve_log_level"]
