"""Logging setup for simulation runs: console output plus an optional JSON-lines file."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import UTC, datetime
from pathlib import Path

import orjson

__all__ = ["JsonFormatter", "LoggingConfig", "configure_logging", "setup_logging"]

_TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
_RECORD_ATTRIBUTES = frozenset(vars(logging.makeLogRecord({}))) | {"message", "asctime"}
_installed: list[logging.Handler] = []


@dataclass(frozen=True, slots=True)
class LoggingConfig:
    """Where run logs go and how they look."""

    level_name: str = "INFO"
    json_console: bool = False
    file_path: Path | None = None
    context: Mapping[str, object] = field(default_factory=dict)

    @property
    def level(self) -> int:
        return logging.getLevelNamesMapping().get(self.level_name.upper(), logging.INFO)


class JsonFormatter(logging.Formatter):
    """One JSON object per record.

    ``context`` is stamped on every line (for example the run's game count and
    seed); ``extra=`` fields passed to a log call land under ``fields``.
    """

    def __init__(self, context: Mapping[str, object] | None = None) -> None:
        super().__init__()
        self._context = dict(context or {})

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, object] = {
            "ts": datetime.fromtimestamp(record.created, UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
            **self._context,
        }
        extras = {k: v for k, v in vars(record).items() if k not in _RECORD_ATTRIBUTES}
        if extras:
            payload["fields"] = extras
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return orjson.dumps(payload, default=str).decode("utf-8")


def configure_logging(config: LoggingConfig) -> None:
    """Replace the root handlers with the ones described by ``config``."""
    shutdown_logging()
    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(config.level)

    console = logging.StreamHandler()
    console.setFormatter(
        JsonFormatter(config.context) if config.json_console else logging.Formatter(_TEXT_FORMAT)
    )
    _installed.append(console)

    if config.file_path is not None:
        config.file_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(config.file_path, encoding="utf-8", delay=True)
        file_handler.setFormatter(JsonFormatter(config.context))
        _installed.append(file_handler)

    for handler in _installed:
        root.addHandler(handler)


def shutdown_logging() -> None:
    """Detach and close the handlers installed by ``configure_logging``."""
    root = logging.getLogger()
    while _installed:
        handler = _installed.pop()
        root.removeHandler(handler)
        handler.close()


def resolve_log_level_name(default: str = "INFO") -> str:
    """Resolve log level with the salvo-prefixed override."""
    value = os.getenv("SALVO_LOG_LEVEL")
    if value is None:
        value = os.getenv("LOG_LEVEL", default)
    return value.strip().upper()


def build_logging_config(context: Mapping[str, object] | None = None) -> LoggingConfig:
    """Build logging config from env vars."""
    log_dir = os.getenv("SALVO_LOG_DIR", "").strip()
    file_path = None
    if log_dir:
        stamp = datetime.now(UTC).strftime("%Y%m%dT%H%M%S")
        file_path = Path(log_dir) / f"salvo_run_{stamp}.jsonl"
    return LoggingConfig(
        level_name=resolve_log_level_name(),
        json_console=os.getenv("LOG_FORMAT", "text").strip().lower() == "json",
        file_path=file_path,
        context=dict(context or {}),
    )


def setup_logging(context: Mapping[str, object] | None = None) -> None:
    """Configure application logging from the environment."""
    config = build_logging_config(context)
    configure_logging(config)
    if config.file_path is not None:
        logging.getLogger(__name__).info("logging_file=%s", config.file_path)
