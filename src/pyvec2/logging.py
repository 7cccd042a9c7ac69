from __future__ import annotations

import logging
import warnings
from pathlib import Path
from shutil import move
from typing import Iterable, List

LOGGER_ID = "pyvec2"
LOG_FORMAT = "%(asctime)-24s|%(levelname)-9s|%(name)-30s|%(message)s"
vec2_logger = logging.getLogger(LOGGER_ID)
module_logger = logging.getLogger(f"{LOGGER_ID}.logging")
vector_logger = logging.getLogger(f"{LOGGER_ID}.vector")
vec2_handlers = list()


class Vec2Error(Exception):
    """
    Generic pyvec2 error.
    """

    pass


class Vec2ArgumentError(Vec2Error, TypeError):
    """
    An operation was called with an argument of the wrong type.
    The message names the operation and the expected type(s).
    """

    pass


def remove_handlers(keep: Iterable[logging.Handler] = ()) -> None:
    """
    Detaches every handler installed by :func:`config_logging` from the root
    logger and closes it.

    Args:
        keep: handlers that are detached but left open, optional
    """
    global vec2_handlers
    keep = list(keep)
    root_logger = logging.getLogger()
    for h in vec2_handlers:
        root_logger.removeHandler(h)
        if h not in keep:
            h.close()
    vec2_handlers = []


def config_logging(
    handlers: List[logging.Handler],
    replace: bool = True,
    level: int = logging.DEBUG,
    redirect_warnings: bool = True,
) -> None:
    """
    Function to configure logging.

    Handlers are attached to the root logger only. Redirected warnings reach
    them through the ``py.warnings`` logger, which propagates to the root.
    Handlers passed here are owned by pyvec2 from then on: replacing them,
    either through ``replace=True`` or :func:`remove_handlers`, also closes them.

    Args:
        handlers: list of already configured logging.Handler objects
        replace: whether to replace existing list of handlers with new ones or whether to add them, optional
        level: log level of the pyvec2 logger object, optional. Defaults to ``logging.DEBUG``.
        redirect_warnings: whether to redirect warnings to the logger. Beware that this modifies the warnings settings.
    """
    global vec2_handlers
    if replace:
        remove_handlers(keep=handlers)
    root_logger = logging.getLogger()
    for h in handlers:
        root_logger.addHandler(h)
    vec2_handlers = vec2_handlers + [h for h in handlers if h not in vec2_handlers]

    vec2_logger.setLevel(level)

    if redirect_warnings:
        logging.captureWarnings(True)
        warnings.simplefilter("once")
    vec2_logger.info("Started pyvec2 logging.")
    for h in handlers:
        if isinstance(h, logging.FileHandler):
            module_logger.info(f"Logging to file: {h.baseFilename}.")


def set_up_simple_logging(
    log_file: str | None = None,
    redirect_warnings: bool = True,
    level: int = logging.INFO,
) -> None:
    """
    Helper function that provides high-level control
    over pyvec2 logging. For low-level control over the
    logging system use :func:`config_logging`.
    Sets up logging to ``sys.stderr`` and optionally to a given file.
    Existing log files are moved to ``<log_file>.1``.
    The library itself only emits ``DEBUG`` records for degenerate numeric
    cases (zero-length normalization, trimming a zero vector, division by
    zero), so pass ``level=logging.DEBUG`` to see them.

    Args:
        log_file: log filename, optional
        redirect_warnings: Whether to redirect warnings to the logger. Beware that this modifies the warnings settings.
        level: log level of handler that is created for the log file. Defaults to ``logging.INFO``.
    """
    sh = logging.StreamHandler()
    sh.setLevel(level)
    formatter = logging.Formatter(LOG_FORMAT)
    sh.setFormatter(formatter)
    handlers: List[logging.Handler] = [sh]
    moved_log = False
    fh = None
    if log_file:
        if Path(log_file).exists():
            move(log_file, f"{log_file}.1")
            moved_log = True
        fh = logging.FileHandler(log_file, "w", "utf-8")
        formatter = logging.Formatter(LOG_FORMAT)
        fh.setFormatter(formatter)
        fh.setLevel(level)
        handlers.append(fh)
    config_logging(
        handlers,
        level=level,
        redirect_warnings=redirect_warnings,
    )
    if moved_log and fh is not None:
        module_logger.info(f"Moved old log file to '{fh.baseFilename}.1'.")
