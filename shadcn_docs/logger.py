"""
Logging for the shadcn_docs package.

Every module logs through a child of the "shadcn_docs" logger, so one call
to setup_logger() sets the level for the whole pipeline.  Query results go
to stdout, so log records always go to stderr (and optionally a file).

The level comes from, in order: the explicit argument, the SHADCN_LOG_LEVEL
environment variable, INFO.
"""

import logging
import os
import sys
from typing import Optional, Union

PACKAGE_LOGGER = "shadcn_docs"
LOG_LEVEL_ENV = "SHADCN_LOG_LEVEL"

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

LevelSpec = Union[int, str, None]


def resolve_level(value: LevelSpec, default: int = logging.INFO) -> int:
    """
    Turn a level name ("debug", "WARNING") or number into a logging level.

    None and blank strings mean `default`.  Anything else that is not a
    known level raises ValueError.
    """
    if value is None:
        return default
    if isinstance(value, int):
        return value

    text = value.strip()
    if not text:
        return default
    if text.isdigit():
        return int(text)

    level = logging.getLevelName(text.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {value!r}")
    return level


def level_from_env(environ: Optional[dict] = None) -> int:
    env = os.environ if environ is None else environ
    return resolve_level(env.get(LOG_LEVEL_ENV))


def setup_logger(
    level: LevelSpec = None,
    log_file: Optional[str] = None,
    environ: Optional[dict] = None
) -> logging.Logger:
    """
    Configure the package logger and return it.

    Safe to call repeatedly: the stderr handler is installed once, later
    calls only change the level and add a file handler for a new path.

    Args:
        level: Level name or number; None reads SHADCN_LOG_LEVEL
        log_file: Optional file to mirror log records into
        environ: Environment mapping to read instead of os.environ

    Returns:
        The "shadcn_docs" logger
    """
    if level is None:
        resolved = level_from_env(environ)
    else:
        resolved = resolve_level(level)

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(resolved)

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    if not any(getattr(h, "_shadcn_stderr", False) for h in package_logger.handlers):
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler._shadcn_stderr = True
        console_handler.setFormatter(formatter)
        package_logger.addHandler(console_handler)

    if log_file:
        target = os.path.abspath(log_file)
        known = [h.baseFilename for h in package_logger.handlers
                 if isinstance(h, logging.FileHandler)]
        if target not in known:
            file_handler = logging.FileHandler(log_file)
            file_handler.setFormatter(formatter)
            package_logger.addHandler(file_handler)

    for handler in package_logger.handlers:
        handler.setLevel(resolved)

    return package_logger


logger = setup_logger()


def get_module_logger(module_name: str) -> logging.Logger:
    """Child logger such as "shadcn_docs.extractor"; records name the emitting stage."""
    return logging.getLogger(f"{PACKAGE_LOGGER}.{module_name}")
