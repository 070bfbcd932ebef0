"""
Logging configuration for the Employee API.

``setup_logging`` applies the ``log_level`` and ``log_file`` values of
a ``Settings`` instance to the root logger: a console handler always,
a file handler when ``log_file`` is set.  Modules log through
``logging.getLogger(__name__)`` and inherit this configuration.
"""

import logging
from pathlib import Path
from typing import List

from .config import Settings

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _build_handlers(settings: Settings) -> List[logging.Handler]:
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if settings.log_file:
        handlers.append(logging.FileHandler(Path(settings.log_file).resolve(), encoding="utf-8"))
    return handlers


def setup_logging(settings: Settings) -> None:
    """Configure the root logger from ``settings``.

    Does nothing when the root logger already has handlers, e.g. when
    running under uvicorn or when ``create_app`` is called more than
    once.  Unknown level names fall back to ``INFO``.
    """
    root = logging.getLogger()
    if root.handlers:
        return

    root.setLevel(getattr(logging, settings.log_level.upper(), logging.INFO))

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    for handler in _build_handlers(settings):
        handler.setFormatter(formatter)
        root.addHandler(handler)
