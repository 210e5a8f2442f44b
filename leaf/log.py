"""Настройка логирования пакета."""

from __future__ import annotations

import logging
import os

_LOG = logging.getLogger("leaf")


def setup_logging() -> None:
    """
    Однократная настройка логгера пакета.
    Уровень DEBUG включается переменной окружения LEAF_DEBUG.
    """
    if getattr(setup_logging, "_inited", False):
        return
    setup_logging._inited = True  # type: ignore[attr-defined]
    level = logging.DEBUG if os.environ.get("LEAF_DEBUG") else logging.INFO
    _LOG.setLevel(level)
    if not _LOG.handlers:
        h = logging.StreamHandler()
        fmt = logging.Formatter("[%(levelname)s] %(name)s: %(message)s")
        h.setFormatter(fmt)
        _LOG.addHandler(h)


__all__ = ["setup_logging"]
