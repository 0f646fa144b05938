from __future__ import annotations

"""Logging for the flagfile parser, the argv loader and the command line.

Every module logs under the 'flagfile' namespace ('flagfile.tokenizer',
'flagfile.runtime', ...). The command line configures the base logger once,
as plain `LEVEL: message` lines on stderr or, with --json-logs, as one JSON
object per line. Per-token tracing of the tokenizer is off unless
FLAGFILE_TRACE_IO=1; it emits one record per scanned token.
"""

import json
import logging
import os
import sys
from datetime import datetime, timezone
from typing import Optional, TextIO

from flagfile.constants import ENV_TRACE_IO, ENV_VERSION

BASE_LOGGER = "flagfile"


class JsonLogFormatter(logging.Formatter):
    """One JSON object per record, for --json-logs.

    Keys are ts (UTC, milliseconds), level, module (the logger name), msg,
    version and, for token traces, ctx with the token kind, value and
    position.
    """

    def __init__(self) -> None:
        super().__init__()
        self._version = self._resolve_version()

    @staticmethod
    def _resolve_version() -> str:
        try:
            from flagfile import __version__ as _v
            return str(_v)
        except ImportError:
            return os.getenv(ENV_VERSION, "unknown")

    def format(self, record: logging.LogRecord) -> str:
        ts = datetime.fromtimestamp(record.created, tz=timezone.utc)
        ts_str = ts.isoformat(timespec="milliseconds").replace("+00:00", "Z")

        payload = {
            "ts": ts_str,
            "level": record.levelname,
            "module": record.name,
            "msg": record.getMessage(),
            "version": self._version,
        }

        ctx = getattr(record, "context", None)
        if isinstance(ctx, dict) and ctx:
            payload["ctx"] = ctx

        return json.dumps(payload, ensure_ascii=False)


def setup_base_logger(
    *, json_logs: bool = False, level: int = logging.INFO, stream: Optional[TextIO] = None
) -> logging.Logger:
    """(Re)configure the 'flagfile' logger with a single stderr handler.

    Calling it again replaces the handler, so the command line can switch
    to JSON output after argument parsing.
    """
    base = logging.getLogger(BASE_LOGGER)
    for handler in list(base.handlers):
        base.removeHandler(handler)
    base.setLevel(level)
    base.propagate = False

    handler = logging.StreamHandler(stream or sys.stderr)
    if json_logs:
        handler.setFormatter(JsonLogFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    base.addHandler(handler)

    return base


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a namespaced logger under 'flagfile'."""
    if not name or name == BASE_LOGGER:
        return logging.getLogger(BASE_LOGGER)
    if name.startswith(BASE_LOGGER + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{BASE_LOGGER}.{name}")


def is_trace_io_enabled() -> bool:
    """True when FLAGFILE_TRACE_IO is set to 1."""
    return os.getenv(ENV_TRACE_IO) == "1"


def trace_io(logger: logging.Logger, message: str, **ctx) -> None:
    """Log *message* at DEBUG with *ctx* attached, when FLAGFILE_TRACE_IO=1.

    The context is both rendered into the text and passed as the record's
    ``context`` so JSON logs carry it as structured data.
    """
    if not is_trace_io_enabled():
        return
    if ctx:
        logger.debug("%s | ctx=%r", message, ctx, extra={"context": ctx})
    else:
        logger.debug("%s", message)
