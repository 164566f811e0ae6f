"""Tests for the structured logging helpers."""

import json
import logging
import threading

import pytest

from pubg_stats.core.logging import (
    ConsoleFormatter,
    JSONFormatter,
    LogLevel,
    RequestContextFilter,
    bootstrap_logging,
    get_context,
    get_logger,
    log_context,
    shutdown_logging,
)
from pubg_stats.core.logging.logger import register_levels, to_level


def _record(msg="hello", **extra):
    record = logging.LogRecord("pubg_stats.test", logging.INFO, __file__, 10, msg, None, None, func="fn")
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_log_context_is_scoped():
    assert "shard" not in get_context()
    with log_context(shard="pc-eu", resource=None) as ctx:
        assert ctx == {"shard": "pc-eu"}
        assert get_context()["shard"] == "pc-eu"
    assert "shard" not in get_context()


def test_json_formatter_includes_context_and_extras():
    with log_context(shard="steam"):
        line = JSONFormatter().format(_record(service="pubg", status=401))
    payload = json.loads(line)
    assert payload["message"] == "hello"
    assert payload["service"] == "pubg"
    assert payload["context"] == {"shard": "steam"}
    assert payload["extra"] == {"status": 401}


def test_console_formatter_without_color():
    line = ConsoleFormatter(color=False).format(_record(status=200))
    assert "\033[" not in line
    assert "hello" in line
    assert "status=200" in line


def test_levels():
    register_levels()
    assert logging.getLevelName(int(LogLevel.TRACE)) == "TRACE"
    assert to_level("success") == int(LogLevel.SUCCESS)
    assert to_level("debug") == logging.DEBUG
    assert to_level("nonsense") == logging.INFO
    assert to_level(15) == 15


def test_lazy_message_not_built_when_disabled(caplog):
    calls = []

    def build():
        calls.append(1)
        return "expensive"

    logger = get_logger("pubg_stats.lazy")
    with caplog.at_level(logging.INFO, logger="pubg_stats.lazy"):
        logger.debug(build)
        assert calls == []
        logger.info(build)
    assert calls == [1]
    assert "expensive" in caplog.text


def test_bootstrap_writes_json_lines(tmp_path):
    root = logging.getLogger()
    saved_handlers, saved_level = list(root.handlers), root.level
    try:
        bootstrap_logging(level="INFO", log_dir=tmp_path, log_file_name="test.jsonl", console=False)
        get_logger("pubg_stats.boot", service="cli").info("started")
        shutdown_logging()
        lines = (tmp_path / "test.jsonl").read_text(encoding="utf-8").splitlines()
        assert json.loads(lines[-1])["message"] == "started"
        assert json.loads(lines[-1])["service"] == "cli"
    finally:
        shutdown_logging()
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)


def test_filter_stamps_context_for_other_threads():
    record = _record()
    with log_context(shard="pc-eu", resource="matches"):
        RequestContextFilter().filter(record)

    lines = []
    worker = threading.Thread(target=lambda: lines.append(JSONFormatter().format(record)))
    worker.start()
    worker.join()

    assert json.loads(lines[0])["context"] == {"shard": "pc-eu", "resource": "matches"}
    assert "context" not in json.loads(lines[0]).get("extra", {})


def test_filter_keeps_existing_stamp():
    record = _record()
    with log_context(shard="steam"):
        RequestContextFilter().filter(record)
    with log_context(shard="kakao"):
        RequestContextFilter().filter(record)
    assert record.context == {"shard": "steam"}


@pytest.mark.asyncio
async def test_client_request_context_reaches_json_file(tmp_path, client, fake_api):
    from conftest import player_resource

    fake_api.add("/shards/pc-eu/players/account.1", {"data": player_resource("account.1", "alpha")})
    root = logging.getLogger()
    saved_handlers, saved_level = list(root.handlers), root.level
    try:
        bootstrap_logging(level="DEBUG", log_dir=tmp_path, log_file_name="p.jsonl", console=False)
        await client.get_player({"id": "account.1"})
        shutdown_logging()

        entries = [json.loads(line) for line in (tmp_path / "p.jsonl").read_text(encoding="utf-8").splitlines()]
        request_line = next(e for e in entries if e["message"].startswith("GET "))
        assert request_line["context"] == {"shard": "pc-eu", "resource": "players"}
        assert request_line["service"] == "pubg"
        assert get_context() == {}
    finally:
        shutdown_logging()
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)
