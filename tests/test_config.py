"""Tests for configuration and logging helpers."""

import json
import sys
from pathlib import Path

import pytest
import structlog

from wumpus.config import Config
from wumpus.logging import (
    close_logging,
    configure_logging,
    get_logger,
    hash_fingerprint_processor,
)


@pytest.fixture
def restore_logging():
    yield
    close_logging()
    structlog.reset_defaults()


def _events(path: Path) -> list[dict]:
    return [json.loads(line) for line in path.read_text().splitlines()]


def test_defaults(monkeypatch):
    for name in (
        "WUMPUS_PORT",
        "WUMPUS_SEED",
        "WUMPUS_JSON_LOGS",
        "WUMPUS_CERTFILE",
        "WUMPUS_ENGINE_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    config = Config.from_env()
    assert config.port == 1965
    assert config.seed is None
    assert not config.json_logs
    assert config.hash_fingerprints
    assert config.certfile is None
    assert config.engine_log_level is None


def test_from_env(monkeypatch):
    monkeypatch.setenv("WUMPUS_PORT", "1966")
    monkeypatch.setenv("WUMPUS_SEED", "42")
    monkeypatch.setenv("WUMPUS_JSON_LOGS", "yes")
    monkeypatch.setenv("WUMPUS_HASH_FINGERPRINTS", "false")
    monkeypatch.setenv("WUMPUS_CERTFILE", "/tmp/cert.pem")
    monkeypatch.setenv("WUMPUS_RECENT_MESSAGES", "3")
    monkeypatch.setenv("WUMPUS_ENGINE_LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("WUMPUS_MAX_SESSIONS", "50")

    config = Config.from_env()
    assert config.port == 1966
    assert config.seed == 42
    assert config.json_logs
    assert not config.hash_fingerprints
    assert config.certfile == Path("/tmp/cert.pem")
    assert config.recent_messages == 3
    assert config.engine_log_level == "DEBUG"
    assert config.max_sessions == 50


def test_fingerprint_is_hashed():
    event = hash_fingerprint_processor(None, "info", {"fingerprint": "abc"})
    assert "fingerprint" not in event
    assert len(event["fingerprint_hash"]) == 12


def test_unknown_fingerprint_is_dropped():
    event = hash_fingerprint_processor(None, "info", {"fingerprint": "unknown"})
    assert event == {}


def test_engine_tracing_without_server_debug(tmp_path: Path, restore_logging):
    log_path = tmp_path / "wumpus.log"
    configure_logging(
        log_level="INFO", log_file=log_path, json_logs=True, engine_log_level="DEBUG"
    )
    get_logger("wumpus.engine.game").debug("player_moved", room=3)
    get_logger("wumpus.session").debug("chatter")
    get_logger("wumpus.session").info("new_game_started", fingerprint="abc")
    close_logging()

    events = _events(log_path)
    assert [e["event"] for e in events] == ["player_moved", "new_game_started"]
    assert events[0]["component"] == "wumpus.engine.game"
    assert events[0]["level"] == "debug"
    assert "fingerprint" not in events[1]
    assert len(events[1]["fingerprint_hash"]) == 12


def test_engine_quieter_than_server(tmp_path: Path, restore_logging):
    log_path = tmp_path / "wumpus.log"
    configure_logging(
        log_level="DEBUG", log_file=log_path, json_logs=True, engine_log_level="INFO"
    )
    get_logger("wumpus.engine.game").debug("player_moved")
    get_logger("wumpus.routes.play").debug("move_requested")
    close_logging()

    assert [e["event"] for e in _events(log_path)] == ["move_requested"]


def test_reconfiguring_closes_previous_file(tmp_path: Path, restore_logging):
    first = configure_logging(log_file=tmp_path / "first.log")
    second = configure_logging(log_file=tmp_path / "second.log")
    assert first.closed
    assert not second.closed

    close_logging()
    assert second.closed


def test_stdout_is_never_closed(restore_logging):
    output = configure_logging(log_level="WARNING")
    assert output is sys.stdout
    close_logging()
    assert not sys.stdout.closed
