"""Structured logging for the server and the rules engine.

Every module logger carries its module name as `component`. Engine
modules log each move and shot at debug level; their threshold is set
apart from the server's so a busy server can trace games without turning
on debug output everywhere.
"""

import hashlib
import logging as stdlib_logging
import sys
from pathlib import Path
from typing import Any, TextIO

import structlog
from structlog.types import Processor

ENGINE_COMPONENT = "wumpus.engine"

# The file handle opened by configure_logging, if any
_log_file: TextIO | None = None


def hash_fingerprint_processor(
    logger: Any, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """Replace client certificate fingerprints with a short hash."""
    fingerprint = event_dict.pop("fingerprint", None)
    if fingerprint and fingerprint != "unknown":
        digest = hashlib.sha256(fingerprint.encode()).hexdigest()
        event_dict["fingerprint_hash"] = digest[:12]
    return event_dict


def level_filter(server_level: int, engine_level: int) -> Processor:
    """Drop events below their component's threshold."""

    def _filter(
        logger: Any, method_name: str, event_dict: dict[str, Any]
    ) -> dict[str, Any]:
        component = event_dict.get("component", "")
        if component.startswith(ENGINE_COMPONENT):
            threshold = engine_level
        else:
            threshold = server_level
        if _to_level(method_name) < threshold:
            raise structlog.DropEvent
        return event_dict

    return _filter


def _to_level(name: str) -> int:
    if name == "exception":
        name = "error"
    level = stdlib_logging.getLevelName(name.upper())
    return level if isinstance(level, int) else stdlib_logging.INFO


def _open_output(log_file: Path | None) -> TextIO:
    """Swap the log file for a new one, closing the previous handle."""
    global _log_file
    close_logging()
    if log_file is None:
        return sys.stdout
    _log_file = open(log_file, "a", encoding="utf-8")
    return _log_file


def close_logging() -> None:
    """Close the log file opened by configure_logging, if there is one."""
    global _log_file
    if _log_file is not None:
        _log_file.close()
        _log_file = None


def configure_logging(
    log_level: str = "INFO",
    log_file: Path | None = None,
    json_logs: bool = False,
    hash_fingerprints: bool = True,
    engine_log_level: str | None = None,
) -> TextIO:
    """Configure structlog and return the stream it writes to.

    engine_log_level defaults to log_level. Calling this again closes the
    file opened by the previous call.
    """
    output = _open_output(log_file)
    server_level = _to_level(log_level)
    engine_level = _to_level(engine_log_level or log_level)

    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        level_filter(server_level, engine_level),
        structlog.processors.TimeStamper(
            fmt="iso" if json_logs else "%Y-%m-%d %H:%M:%S"
        ),
    ]
    if hash_fingerprints:
        processors.append(hash_fingerprint_processor)
    processors.append(
        structlog.processors.JSONRenderer()
        if json_logs
        else structlog.dev.ConsoleRenderer(colors=output.isatty())
    )

    structlog.configure(
        processors=processors,
        # The lower threshold here; level_filter applies each component's own
        wrapper_class=structlog.make_filtering_bound_logger(
            min(server_level, engine_level)
        ),
        context_class=dict,
        logger_factory=structlog.WriteLoggerFactory(file=output),
        cache_logger_on_first_use=True,
    )
    return output


def get_logger(name: str) -> structlog.BoundLogger:
    """Get a logger tagged with its module name."""
    return structlog.get_logger(name, component=name)
