"""Unit tests for structlog configuration."""

from __future__ import annotations

import json
import os
from collections.abc import Iterator
from unittest.mock import patch

import pytest
import structlog

from examguard.infrastructure.observability import (
    bind_request_context,
    clear_request_context,
    configure_structlog,
)


@pytest.fixture(autouse=True)
def _reset_structlog() -> Iterator[None]:
    yield
    clear_request_context()
    structlog.reset_defaults()


class TestConfigureStructlog:
    """Tests for configure_structlog()."""

    def test_production_renders_json(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_structlog(environment="production")

        structlog.get_logger().info("extension_applied", activity_id=42)

        line = capsys.readouterr().out.strip().splitlines()[-1]
        entry = json.loads(line)
        assert entry["event"] == "extension_applied"
        assert entry["activity_id"] == 42
        assert entry["level"] == "info"
        assert "timestamp" in entry

    def test_request_context_is_merged(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_structlog(environment="production")
        bind_request_context(course_id=5, user_id=2)

        structlog.get_logger().info("guard_role_assigned")

        entry = json.loads(capsys.readouterr().out.strip().splitlines()[-1])
        assert entry["course_id"] == 5
        assert entry["user_id"] == 2

    def test_level_from_environment(self, capsys: pytest.CaptureFixture[str]) -> None:
        with patch.dict(os.environ, {"EXAMGUARD_LOG_LEVEL": "warning"}):
            configure_structlog(environment="production")

        structlog.get_logger().info("hidden_event")
        structlog.get_logger().warning("visible_event")

        out = capsys.readouterr().out
        assert "hidden_event" not in out
        assert "visible_event" in out
