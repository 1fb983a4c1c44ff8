"""The Hunt the Wumpus rules engine.

GameEngine owns one GameState. Mutating calls append their lines to the
session log and also return just the lines they produced, in order. Illegal
actions never raise: they come back as a message and leave state alone.
"""

import copy

from ..logging import get_logger
from .cave import Hazard, new_chambers
from .random_source import DefaultRandomSource, RandomSource
from .state import (
    BAT_COUNT,
    INITIAL_ARROWS,
    PIT_COUNT,
    WUMPUS_MOVE_CHANCE,
    GameState,
    Player,
)

logger = get_logger(__name__)

WELCOME = "Welcome to Hunt the Wumpus!"
RESTARTED = "Game restarted. Good luck!"
GENERIC_DESCRIPTION = "You enter a cave chamber."
INVALID_MOVE = "Invalid move!"
INVALID_TARGET = "Invalid target!"
GAME_OVER = "Game over!"
OUT_OF_ARROWS = "You're out of arrows!"
AIM_PROMPT = "Select a connected room to shoot your arrow into."

WARNINGS = {
    Hazard.WUMPUS: "You smell a terrible stench...",
    Hazard.PIT: "You feel a cold draft...",
    Hazard.BATS: "You hear rustling...",
}


class GameEngine:
    """One single-player game session."""

    def __init__(self, random_source: RandomSource | None = None):
        self._random = random_source or DefaultRandomSource()
        rooms = new_chambers()
        start = self._random.bounded_int(0, len(rooms))
        self._state = GameState(
            rooms=rooms,
            player=Player(room=start),
            message_log=[WELCOME, f"You begin your adventure in room {start + 1}."],
        )
        self._place_hazards()
        logger.debug("game_started", start_room=start + 1)

    # --- Queries ---

    def snapshot(self) -> GameState:
        """Return a deep copy of the current state."""
        return copy.deepcopy(self._state)

    def is_valid_move(self, target: int) -> bool:
        if self._state.game_over or self._state.aim_mode:
            return False
        return target in self._state.current_room.connections

    def is_valid_shoot_target(self, target: int) -> bool:
        if not self._state.aim_mode:
            return False
        return target in self._state.current_room.connections

    # --- Actions ---

    def move_player(self, target: int) -> list[str]:
        """Walk into a neighbouring chamber and resolve whatever is there."""
        if not self.is_valid_move(target):
            return [INVALID_MOVE]

        state = self._state
        state.player.room = target
        room = state.rooms[target]
        messages: list[str] = []
        self._say(
            messages,
            f"You move to room {target + 1}.",
            room.description or GENERIC_DESCRIPTION,
        )

        if room.hazard is Hazard.WUMPUS:
            self._kill_player()
            self._say(
                messages,
                "OH NO! You walked into the Wumpus's room!",
                "The Wumpus devours you. GAME OVER!",
            )
        elif room.hazard is Hazard.PIT:
            self._kill_player()
            self._say(
                messages,
                "AAAAHHHH! You fell into a bottomless pit!",
                "GAME OVER!",
            )
        elif room.hazard is Hazard.BATS:
            # The drop is unconstrained and the landing chamber's hazard
            # is not resolved.
            drop = self._random.bounded_int(0, len(state.rooms))
            state.player.room = drop
            self._say(
                messages,
                "Giant bats swoop down and carry you away!",
                f"They drop you in room {drop + 1}.",
            )
            if state.rooms[drop].description:
                self._say(messages, state.rooms[drop].description)
            logger.debug("player_carried_by_bats", from_room=target + 1, to_room=drop + 1)

        if not state.game_over:
            messages.extend(self._add_hazard_warnings())

        logger.debug(
            "player_moved",
            room=state.player.room + 1,
            hazard=room.hazard.value,
            alive=state.player.alive,
        )
        return messages

    def enter_aim_mode(self) -> list[str]:
        if self._state.game_over:
            self._state.message_log.append(GAME_OVER)
            return [GAME_OVER]
        if self._state.player.arrows <= 0:
            self._state.message_log.append(OUT_OF_ARROWS)
            return [OUT_OF_ARROWS]

        self._state.aim_mode = True
        self._state.message_log.append(AIM_PROMPT)
        return [AIM_PROMPT]

    def exit_aim_mode(self) -> None:
        self._state.aim_mode = False
        self._state.selected_room = None

    def shoot_arrow(self, target: int) -> list[str]:
        """Fire into a neighbouring chamber. Invalid targets cost no arrow."""
        if not self.is_valid_shoot_target(target):
            self.exit_aim_mode()
            self._state.message_log.append(INVALID_TARGET)
            return [INVALID_TARGET]

        state = self._state
        state.player.arrows -= 1
        state.aim_mode = False
        messages: list[str] = []
        self._say(messages, f"You shoot an arrow into room {target + 1}!")

        if target == state.wumpus_room:
            state.win = True
            state.game_over = True
            self._say(
                messages,
                "You hear a terrible howl!",
                "You have slain the Wumpus! YOU WIN!",
            )
            logger.debug("wumpus_slain", room=target + 1, arrows=state.player.arrows)
            return messages

        self._say(messages, "Your arrow disappears into the darkness...")

        if state.player.arrows <= 0:
            state.game_over = True
            self._say(
                messages,
                "You've used your last arrow!",
                "With no way to defend yourself, you flee the cave. GAME OVER!",
            )
        elif self._random.uniform() < WUMPUS_MOVE_CHANCE:
            self._move_wumpus()
            self._say(messages, "You hear movement in the darkness...")
            if state.wumpus_room == state.player.room:
                self._kill_player()
                self._say(
                    messages,
                    "The Wumpus was startled by your arrow and moved into your room!",
                    "It devours you. GAME OVER!",
                )

        logger.debug(
            "arrow_missed",
            room=target + 1,
            arrows=state.player.arrows,
            game_over=state.game_over,
        )
        return messages

    def reset_game(self) -> None:
        """Start over in chamber 0 with freshly placed hazards."""
        self._state = GameState(
            rooms=new_chambers(),
            player=Player(room=0, arrows=INITIAL_ARROWS),
            message_log=[RESTARTED],
        )
        self._place_hazards()
        logger.debug("game_reset")

    # --- Internals ---

    def _say(self, messages: list[str], *lines: str) -> None:
        messages.extend(lines)
        self._state.message_log.extend(lines)

    def _kill_player(self) -> None:
        self._state.player.alive = False
        self._state.game_over = True

    def _place_hazards(self) -> None:
        state = self._state
        available = [room.id for room in state.rooms]
        available.remove(state.player.room)
        if state.current_room.description:
            state.message_log.append(state.current_room.description)

        state.wumpus_room = self._draw_room(available, Hazard.WUMPUS)
        for _ in range(PIT_COUNT):
            state.pit_rooms.append(self._draw_room(available, Hazard.PIT))
        for _ in range(BAT_COUNT):
            state.bat_rooms.append(self._draw_room(available, Hazard.BATS))

        self._add_hazard_warnings()
        logger.debug(
            "hazards_placed",
            wumpus=state.wumpus_room + 1,
            pits=[room + 1 for room in state.pit_rooms],
            bats=[room + 1 for room in state.bat_rooms],
        )

    def _draw_room(self, available: list[int], hazard: Hazard) -> int:
        """Take one chamber id out of available and tag it with hazard."""
        room_id = self._random.pick(available)
        available.remove(room_id)
        self._state.rooms[room_id].hazard = hazard
        return room_id

    def _add_hazard_warnings(self) -> list[str]:
        """Log one warning per hazard type next to the player."""
        nearby = {
            self._state.rooms[neighbour].hazard
            for neighbour in self._state.current_room.connections
        }
        lines = [text for hazard, text in WARNINGS.items() if hazard in nearby]
        self._state.message_log.extend(lines)
        return lines

    def _move_wumpus(self) -> None:
        state = self._state
        old = state.wumpus_room
        new = self._random.pick(state.rooms[old].connections)
        state.rooms[old].hazard = Hazard.NONE
        state.rooms[new].hazard = Hazard.WUMPUS
        state.wumpus_room = new
        logger.debug("wumpus_moved", from_room=old + 1, to_room=new + 1)
