"""Shared test fixtures for Hunt the Wumpus."""

from collections.abc import Callable, Iterable

import pytest

from wumpus.app import create_app
from wumpus.config import Config
from wumpus.engine.cave import Hazard
from wumpus.engine.game import GameEngine
from wumpus.engine.random_source import ScriptedRandomSource


@pytest.fixture
def scripted() -> ScriptedRandomSource:
    # 0.25 * 16 chambers puts the player in chamber 4 (room 5)
    return ScriptedRandomSource([0.25])


@pytest.fixture
def game(scripted: ScriptedRandomSource) -> GameEngine:
    return GameEngine(scripted)


@pytest.fixture
def set_hazards() -> Callable[..., None]:
    """Replace a game's hazard layout with a hand-picked one."""

    def _set(
        game: GameEngine,
        wumpus: int,
        pits: Iterable[int] = (),
        bats: Iterable[int] = (),
    ) -> None:
        state = game._state
        for room in state.rooms:
            room.hazard = Hazard.NONE
        state.wumpus_room = wumpus
        state.rooms[wumpus].hazard = Hazard.WUMPUS
        state.pit_rooms = list(pits)
        for room_id in state.pit_rooms:
            state.rooms[room_id].hazard = Hazard.PIT
        state.bat_rooms = list(bats)
        for room_id in state.bat_rooms:
            state.rooms[room_id].hazard = Hazard.BATS

    return _set


@pytest.fixture
def test_config() -> Config:
    return Config(recent_messages=6)


@pytest.fixture
def app(test_config: Config):
    return create_app(test_config, random_factory=lambda: ScriptedRandomSource([0.25]))


@pytest.fixture
def client(app):
    from xitzin.testing import test_app

    with test_app(app) as client:
        yield client


@pytest.fixture
def auth_client(client):
    return client.with_certificate("test-fingerprint-abc123")
