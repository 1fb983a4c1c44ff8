"""In-memory game sessions, one engine per client certificate.

Nothing here touches disk: a server restart ends every game. The store
holds at most `max_sessions` games and drops the least recently played
one to make room for a newcomer.
"""

from collections import OrderedDict
from collections.abc import Callable

from .engine.game import GameEngine
from .engine.random_source import DefaultRandomSource, RandomSource
from .logging import get_logger

logger = get_logger(__name__)


class SessionStore:
    """Maps certificate fingerprints to running games."""

    def __init__(
        self,
        random_factory: Callable[[], RandomSource] | None = None,
        max_sessions: int = 1000,
    ):
        if max_sessions < 1:
            raise ValueError("max_sessions must be at least 1")
        self._random_factory = random_factory or DefaultRandomSource
        self._max_sessions = max_sessions
        # Least recently played first
        self._games: OrderedDict[str, GameEngine] = OrderedDict()

    def __len__(self) -> int:
        return len(self._games)

    def __contains__(self, fingerprint: str) -> bool:
        return fingerprint in self._games

    def load_or_create(self, fingerprint: str) -> GameEngine:
        """Return the player's game, starting one on first contact."""
        game = self._games.get(fingerprint)
        if game is not None:
            self._games.move_to_end(fingerprint)
            return game

        while len(self._games) >= self._max_sessions:
            evicted, _ = self._games.popitem(last=False)
            logger.info("session_evicted", fingerprint=evicted)

        game = GameEngine(self._random_factory())
        self._games[fingerprint] = game
        logger.info(
            "new_game_started",
            fingerprint=fingerprint,
            room=game.snapshot().player.room + 1,
            sessions=len(self._games),
        )
        return game

    def reset(self, fingerprint: str) -> GameEngine:
        """Restart the player's game in place."""
        game = self.load_or_create(fingerprint)
        game.reset_game()
        logger.info("game_reset", fingerprint=fingerprint)
        return game
