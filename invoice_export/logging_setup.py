from __future__ import annotations

import logging
import os
import sys
from collections.abc import Iterable
from logging.handlers import RotatingFileHandler
from pathlib import Path

from .env import env_flag


PACKAGE_LOGGER = "invoice_export"
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

_LOG_FILE_NAME = "invoice_export.log"
_MAX_LOG_BYTES = 5 * 1024 * 1024
_BACKUP_COUNT = 5
_OWNED = "_invoice_export_handler"


def _owned_handlers(logger: logging.Logger) -> list[logging.Handler]:
    return [h for h in logger.handlers if getattr(h, _OWNED, False)]


def _build_handlers(level: int, log_dir: Path | None) -> list[logging.Handler]:
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_dir is not None:
        log_dir.mkdir(parents=True, exist_ok=True)
        handlers.append(
            RotatingFileHandler(log_dir / _LOG_FILE_NAME, maxBytes=_MAX_LOG_BYTES, backupCount=_BACKUP_COUNT)
        )
    formatter = logging.Formatter(LOG_FORMAT)
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        setattr(handler, _OWNED, True)
    return handlers


def setup_logging(
    *,
    debug: bool | None = None,
    to_file: bool = True,
    extra_loggers: Iterable[str] = (),
) -> logging.Logger:
    """
    Attach console (and optionally rotating file) handlers to the package
    logger and to ``extra_loggers`` (``run()`` passes ``"uvicorn"``).

    Safe to call repeatedly: loggers that already carry our handlers only get
    their level updated. ``INVOICE_EXPORT_DEBUG=1`` switches to DEBUG when
    ``debug`` is not given; ``INVOICE_EXPORT_LOG_DIR`` picks the file location.
    """
    if debug is None:
        debug = env_flag("INVOICE_EXPORT_DEBUG")
    level = logging.DEBUG if debug else logging.INFO
    log_dir = Path(os.getenv("INVOICE_EXPORT_LOG_DIR", "./data/logs")) if to_file else None

    shared: list[logging.Handler] | None = None
    for name in (PACKAGE_LOGGER, *extra_loggers):
        logger = logging.getLogger(name)
        logger.setLevel(level)
        owned = _owned_handlers(logger)
        if owned:
            for handler in owned:
                handler.setLevel(level)
            continue
        # one set of handlers for every logger, so the log file is opened once
        if shared is None:
            shared = _build_handlers(level, log_dir)
        for handler in shared:
            logger.addHandler(handler)

    return logging.getLogger(PACKAGE_LOGGER)

