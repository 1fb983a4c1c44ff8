"""Xitzin application factory for Hunt the Wumpus."""

from collections.abc import Callable
from pathlib import Path

from xitzin import Xitzin

from .config import Config
from .engine.cave import CAVE_LAYOUT
from .engine.random_source import DefaultRandomSource, RandomSource
from .logging import get_logger
from .session import SessionStore

logger = get_logger(__name__)


def create_app(
    config: Config | None = None,
    random_factory: Callable[[], RandomSource] | None = None,
) -> Xitzin:
    """Create and configure the Xitzin application.

    random_factory builds the random source for each new game. It defaults
    to a DefaultRandomSource seeded from config.seed.
    """
    config = config or Config.from_env()

    if random_factory is None:

        def random_factory() -> RandomSource:
            return DefaultRandomSource(config.seed)

    app = Xitzin(
        title="Hunt the Wumpus",
        version="0.1.0",
        templates_dir=Path(__file__).parent / "templates",
    )
    app.state.config = config
    app.state.sessions = SessionStore(random_factory, max_sessions=config.max_sessions)

    @app.on_startup
    async def startup():
        logger.info(
            "startup_complete",
            chambers=len(CAVE_LAYOUT),
            seeded=config.seed is not None,
        )

    from .routes import home, play

    home.register_routes(app)
    play.register_routes(app)

    return app
