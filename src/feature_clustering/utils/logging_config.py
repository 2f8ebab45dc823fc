"""
Logging configuration for Feature Clustering.

Every module obtains its logger through ``get_logger(__name__)`` so that all
records live under the ``feature_clustering`` namespace. Nothing is printed
until ``setup_logging`` attaches a handler (or the host application
configures logging itself).

Usage:
    from feature_clustering.utils.logging_config import get_logger, setup_logging

    setup_logging("DEBUG")
    logger = get_logger(__name__)
    logger.debug("Cached %d pairwise distances", count)
"""

import logging
from typing import Optional, Union

ROOT_LOGGER_NAME = "feature_clustering"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_handler: Optional[logging.Handler] = None


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger inside the package namespace.

    Args:
        name: Usually ``__name__`` of the calling module

    Returns:
        Logger instance
    """
    if name != ROOT_LOGGER_NAME and not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def setup_logging(
    level: Optional[Union[int, str]] = None,
    fmt: str = DEFAULT_FORMAT,
) -> logging.Logger:
    """
    Attach a stream handler to the package root logger.

    Calling this more than once only updates the level; the handler is added
    a single time.

    Args:
        level: Logging level name or number. Defaults to the configured
            ``CLUSTERING_LOG_LEVEL``.
        fmt: Format string for the handler

    Returns:
        The package root logger

    Raises:
        ValueError: If the level name is unknown
    """
    global _handler

    if level is None:
        from ..config import config

        level = config.clustering.log_level

    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown log level: {level}")
        level = resolved

    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.setLevel(level)

    if _handler is None:
        _handler = logging.StreamHandler()
        _handler.setFormatter(logging.Formatter(fmt))
        root.addHandler(_handler)

    return root
