"""Logging set-up for the scraper CLI and API server.

Call :func:`setup_logger` once at program start. Library modules log through
``logging.getLogger(__name__)`` and inherit these handlers.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional, Union

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logger(
    level: Union[int, str] = logging.INFO,
    log_dir: Optional[Path] = None,
    name: str = "nfib_scraper",
) -> logging.Logger:
    """Attach console (and optionally file) handlers to the package logger.

    Parameters
    ----------
    level : int or str
        Console log level, e.g. ``"INFO"``.
    log_dir : Path, optional
        When given, a timestamped ``run_*.log`` file with DEBUG output is
        written there as well.
    name : str, optional
        Logger to configure. Defaults to the package logger.

    Returns
    -------
    logging.Logger
        The configured logger. Repeated calls do not add duplicate handlers.
    """
    logger = logging.getLogger(name)
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
    logger.setLevel(logging.DEBUG if log_dir else level)

    if getattr(logger, "_nfib_configured", False):
        return logger

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    ch = logging.StreamHandler()
    ch.setLevel(level)
    ch.setFormatter(formatter)
    logger.addHandler(ch)

    if log_dir:
        log_dir = Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        timestamp = datetime.now(timezone.utc).strftime("%Y%m%d_%H%M%S")
        fh = logging.FileHandler(log_dir / f"run_{timestamp}.log", encoding="utf-8")
        fh.setLevel(logging.DEBUG)
        fh.setFormatter(formatter)
        logger.addHandler(fh)
        logger.debug("Logger initialised. Log file: %s", fh.baseFilename)

    logger._nfib_configured = True
    return logger
