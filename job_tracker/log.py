"""Logging setup for the tracker, stdlib only.

Every module asks for ``log = get_logger(__name__)``. The first call wires a
stdout handler and a dated file handler under ``logs/`` onto the root logger;
``configure`` can be called again later (e.g. once settings are loaded) to
change the level.
"""
from __future__ import annotations

import logging
import os
import sys
from datetime import date
from pathlib import Path

LOG_DIR: Path = Path(__file__).resolve().parent.parent / "logs"
_FORMAT = "%(asctime)s  %(levelname)-8s  %(name)s  %(message)s"
_DATE_FMT = "%Y-%m-%d %H:%M:%S"
_configured = False


def get_logger(name: str) -> logging.Logger:
    if not _configured:
        configure()
    return logging.getLogger(name)


def configure(level: str | None = None, log_dir: Path | None = None) -> None:
    """Attach handlers once and (re)apply the level.

    ``level`` falls back to ``LOG_LEVEL`` from the environment, then INFO.
    """
    global _configured
    level_name = (level or os.environ.get("LOG_LEVEL") or "INFO").upper()
    numeric = getattr(logging, level_name, logging.INFO)

    root = logging.getLogger()
    root.setLevel(numeric)
    for handler in root.handlers:
        if isinstance(handler, logging.StreamHandler) and not isinstance(handler, logging.FileHandler):
            handler.setLevel(numeric)

    if _configured or root.handlers:
        _configured = True
        return
    _configured = True

    formatter = logging.Formatter(_FORMAT, datefmt=_DATE_FMT)
    console = logging.StreamHandler(sys.stdout)
    console.setLevel(numeric)
    console.setFormatter(formatter)
    root.addHandler(console)

    target = log_dir or LOG_DIR
    try:
        target.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(target / f"tracker_{date.today():%Y-%m-%d}.log", encoding="utf-8")
    except OSError:
        return
    fh.setLevel(logging.DEBUG)
    fh.setFormatter(formatter)
    root.addHandler(fh)
