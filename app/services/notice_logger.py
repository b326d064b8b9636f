"""Logging capability injected into the fetcher and parser."""

import logging
from typing import Any, Mapping, Optional, Protocol

_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


class NoticeLogger(Protocol):
    def log(self, severity: str, message: str, context: Optional[Mapping[str, Any]] = None) -> None:
        ...


class StdlibNoticeLogger:
    """Forward ``log(severity, message, context)`` calls to :mod:`logging`.

    ``{name}`` placeholders in *message* are filled from *context*; the
    context map is also attached to the record as ``extra`` so structured
    handlers can pick it up. Unknown severities are logged at ERROR.
    """

    def __init__(self, name: str = "app.notices") -> None:
        self._logger = logging.getLogger(name)

    def log(self, severity: str, message: str, context: Optional[Mapping[str, Any]] = None) -> None:
        context = dict(context or {})
        level = _LEVELS.get(severity.lower(), logging.ERROR)
        try:
            rendered = message.format(**context)
        except (KeyError, IndexError, ValueError):
            rendered = message
        self._logger.log(level, rendered, extra={"context": context})
