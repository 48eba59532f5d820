from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

import orjson
import pytest

from salvo.infra.logging import (
    JsonFormatter,
    LoggingConfig,
    build_logging_config,
    configure_logging,
    shutdown_logging,
)


@pytest.fixture(autouse=True)
def _restore_root_logger() -> Iterator[None]:
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    shutdown_logging()
    root.handlers[:] = handlers
    root.setLevel(level)


def test_json_formatter_includes_context_fields_and_message() -> None:
    logger = logging.getLogger("test.json.formatter")
    record = logger.makeRecord(
        name=logger.name,
        level=logging.INFO,
        fn=__file__,
        lno=1,
        msg="hello %s",
        args=("world",),
        exc_info=None,
        extra={"custom": 1},
    )
    payload = orjson.loads(JsonFormatter({"games": 3, "seed": 5}).format(record))
    assert payload["msg"] == "hello world"
    assert payload["level"] == "INFO"
    assert payload["games"] == 3 and payload["seed"] == 5
    assert payload["fields"] == {"custom": 1}


def test_configure_logging_text_and_json() -> None:
    configure_logging(LoggingConfig(level_name="DEBUG"))
    root = logging.getLogger()
    assert root.level == logging.DEBUG
    assert len(root.handlers) == 1
    assert not isinstance(root.handlers[0].formatter, JsonFormatter)

    configure_logging(LoggingConfig(level_name="warning", json_console=True))
    assert root.level == logging.WARNING
    assert len(root.handlers) == 1
    assert isinstance(root.handlers[0].formatter, JsonFormatter)


def test_unknown_level_name_falls_back_to_info() -> None:
    assert LoggingConfig(level_name="chatty").level == logging.INFO


def test_shutdown_logging_detaches_installed_handlers() -> None:
    configure_logging(LoggingConfig())
    installed = list(logging.getLogger().handlers)
    shutdown_logging()
    assert not any(handler in logging.getLogger().handlers for handler in installed)


def test_build_logging_config_reads_env(monkeypatch, tmp_path) -> None:
    monkeypatch.setenv("SALVO_LOG_LEVEL", "")
    monkeypatch.delenv("SALVO_LOG_LEVEL")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("LOG_FORMAT", "JSON")
    monkeypatch.setenv("SALVO_LOG_DIR", "")
    config = build_logging_config()
    assert config.level_name == "DEBUG"
    assert config.json_console
    assert config.file_path is None

    monkeypatch.setenv("SALVO_LOG_LEVEL", "error")
    monkeypatch.setenv("SALVO_LOG_DIR", str(tmp_path))
    config = build_logging_config({"seed": 9})
    assert config.level_name == "ERROR"
    assert config.file_path is not None and config.file_path.suffix == ".jsonl"
    assert config.file_path.parent == Path(tmp_path)
    assert config.context == {"seed": 9}


def test_file_logging_writes_json_lines_with_context(tmp_path) -> None:
    log_file = tmp_path / "logs" / "run.jsonl"
    configure_logging(LoggingConfig(file_path=log_file, context={"games": 2}))
    logging.getLogger("test.logging.file").info("hello %s", "file")
    shutdown_logging()
    line = orjson.loads(log_file.read_text(encoding="utf-8").splitlines()[-1])
    assert line["msg"] == "hello file"
    assert line["games"] == 2
