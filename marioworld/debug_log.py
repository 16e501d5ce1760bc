"""Debug-channel logging with either a free-form label or a severity code."""

from __future__ import annotations

import logging

LOG_INFO = 0
LOG_WARN = 1
LOG_ERROR = 2

_SEVERITY_LABELS = {
    LOG_INFO: "INFO",
    LOG_WARN: "WARN",
    LOG_ERROR: "ERROR",
}

logger = logging.getLogger("marioworld")


def _label_text(label: str | int) -> str:
    if isinstance(label, str):
        return label
    return _SEVERITY_LABELS.get(label, "LOG")


def log(label: str | int, value: str) -> str:
    """Write ``[label] value`` to the debug channel and return that line.

    A string label is used as is. An integer label is a severity code:
    ``LOG_INFO``, ``LOG_WARN`` and ``LOG_ERROR`` print their names, and any
    other code prints ``LOG``.
    """
    line = f"[{_label_text(label)}] {value}"
    logger.debug(line)
    return line