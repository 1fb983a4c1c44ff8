"""Mutable per-game state.

Holds only plain values and Chamber objects so a snapshot is a simple
deep copy.
"""

from dataclasses import dataclass, field

from .cave import Chamber

INITIAL_ARROWS = 5

# Sentinel for a Wumpus that has not been placed yet
UNPLACED = -1

PIT_COUNT = 2
BAT_COUNT = 2

# Chance the Wumpus wanders after a missed arrow
WUMPUS_MOVE_CHANCE = 0.25


@dataclass
class Player:
    room: int
    arrows: int = INITIAL_ARROWS
    alive: bool = True


@dataclass
class GameState:
    """Everything the engine knows about one game."""

    rooms: list[Chamber]
    player: Player
    wumpus_room: int = UNPLACED
    pit_rooms: list[int] = field(default_factory=list)
    bat_rooms: list[int] = field(default_factory=list)
    game_over: bool = False
    win: bool = False
    # Whole-session transcript, append only
    message_log: list[str] = field(default_factory=list)
    # Reserved for two-step targeting; always None under current rules
    selected_room: int | None = None
    aim_mode: bool = False

    @property
    def current_room(self) -> Chamber:
        return self.rooms[self.player.room]
