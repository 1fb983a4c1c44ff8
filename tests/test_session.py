"""Tests for the in-memory session store."""

import pytest

from wumpus.engine.game import RESTARTED, GameEngine
from wumpus.engine.random_source import ScriptedRandomSource
from wumpus.session import SessionStore


def _store() -> SessionStore:
    return SessionStore(lambda: ScriptedRandomSource([0.25]))


def test_load_or_create_reuses_game():
    store = _store()
    first = store.load_or_create("alice")
    assert store.load_or_create("alice") is first
    assert "alice" in store
    assert len(store) == 1


def test_players_get_separate_games():
    store = _store()
    alice = store.load_or_create("alice")
    bob = store.load_or_create("bob")
    assert alice is not bob

    alice.move_player(0)
    assert alice.snapshot().player.room == 0
    assert bob.snapshot().player.room == 4


def test_reset_keeps_engine():
    store = _store()
    game = store.load_or_create("alice")
    game.move_player(0)

    assert store.reset("alice") is game
    assert game.snapshot().message_log[0] == RESTARTED


def test_reset_unknown_player_starts_game():
    store = _store()
    game = store.reset("carol")
    assert "carol" in store
    assert game.snapshot().player.room == 0


def test_default_factory():
    game = SessionStore().load_or_create("dave")
    assert isinstance(game, GameEngine)


def test_least_recently_played_is_evicted():
    store = SessionStore(lambda: ScriptedRandomSource([0.25]), max_sessions=2)
    alice = store.load_or_create("alice")
    store.load_or_create("bob")
    assert store.load_or_create("alice") is alice

    store.load_or_create("carol")

    assert len(store) == 2
    assert "alice" in store
    assert "bob" not in store
    assert "carol" in store


def test_max_sessions_must_be_positive():
    with pytest.raises(ValueError):
        SessionStore(max_sessions=0)
