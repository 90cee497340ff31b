"""
Tests for the logging module.

Tests verify:
- JSON output carries service metadata and ECS field names
- Level filtering
- Context binding and scoping
"""

from __future__ import annotations

import asyncio
import json

import pytest

from seqid.core.logging import (
    LogContext,
    bind_context,
    clear_context,
    configure_logging,
    get_logger,
    unbind_context,
)


def _json_lines(text: str) -> list[dict]:
    return [json.loads(line) for line in text.splitlines() if line.strip()]


class TestConfigureLogging:
    def test_json_output_has_ecs_fields(self, capsys):
        configure_logging(level="INFO", json_format=True, service="orders")
        get_logger("seqid.test").info("id_generated", id=12300011)

        [entry] = _json_lines(capsys.readouterr().err)
        assert entry["event"] == "id_generated"
        assert entry["id"] == 12300011
        assert entry["service.name"] == "orders"
        assert entry["log.level"] == "info"
        assert entry["logger_name"] == "seqid.test"
        assert "@timestamp" in entry

    def test_logs_do_not_reach_stdout(self, capsys):
        configure_logging(json_format=True)
        get_logger(__name__).warning("origin_in_future")
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "origin_in_future" in captured.err

    def test_level_filtering(self, capsys):
        configure_logging(level="WARNING", json_format=True)
        logger = get_logger(__name__)
        logger.info("hidden")
        logger.warning("shown")

        events = [entry["event"] for entry in _json_lines(capsys.readouterr().err)]
        assert events == ["shown"]

    def test_without_timestamp(self, capsys):
        configure_logging(json_format=True, add_timestamp=False)
        get_logger().info("plain")
        [entry] = _json_lines(capsys.readouterr().err)
        assert "@timestamp" not in entry

    def test_console_format(self, capsys):
        configure_logging(json_format=False)
        get_logger().info("console_event")
        assert "console_event" in capsys.readouterr().err

    def test_unknown_level_raises(self):
        with pytest.raises(AttributeError):
            configure_logging(level="chatty")


class TestLogContext:
    def test_bind_and_unbind(self, capsys):
        configure_logging(json_format=True)
        logger = get_logger()

        bind_context(request_id="abc123")
        logger.info("first")
        unbind_context("request_id")
        logger.info("second")

        first, second = _json_lines(capsys.readouterr().err)
        assert first["request_id"] == "abc123"
        assert "request_id" not in second

    def test_clear_context(self, capsys):
        configure_logging(json_format=True)
        bind_context(batch="b1")
        clear_context()
        get_logger().info("after_clear")
        [entry] = _json_lines(capsys.readouterr().err)
        assert "batch" not in entry

    def test_context_manager_scopes_values(self, capsys):
        configure_logging(json_format=True)
        logger = get_logger()

        with LogContext(order_batch="2026-10-18"):
            logger.info("inside")
        logger.info("outside")

        inside, outside = _json_lines(capsys.readouterr().err)
        assert inside["order_batch"] == "2026-10-18"
        assert "order_batch" not in outside

    def test_async_context_manager(self, capsys):
        configure_logging(json_format=True)

        async def scoped() -> None:
            async with LogContext(run="r1"):
                get_logger().info("async_inside")

        asyncio.run(scoped())
        [entry] = _json_lines(capsys.readouterr().err)
        assert entry["run"] == "r1"
