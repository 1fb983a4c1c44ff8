"""Gameplay routes."""

from collections.abc import Sequence

from xitzin import Redirect, Request, Xitzin
from xitzin.auth import get_identity, require_certificate

from ..engine.game import GameEngine
from ..logging import get_logger

logger = get_logger(__name__)


def _game(request: Request) -> tuple[GameEngine, str]:
    """Look up the caller's running game by certificate fingerprint."""
    fingerprint = get_identity(request).fingerprint
    return request.app.state.sessions.load_or_create(fingerprint), fingerprint


def _parse_room(room: str) -> int:
    """Turn a 1-based room number from the URL into a chamber id.

    Anything unparsable becomes -1, which the engine rejects as a target.
    """
    try:
        return int(room) - 1
    except ValueError:
        return -1


def _render_play(app: Xitzin, game: GameEngine, messages: Sequence[str] = ()):
    """Render the main play view."""
    state = game.snapshot()
    room = state.current_room
    action = "shoot" if state.aim_mode else "move"
    exits = [
        {"number": neighbour + 1, "url": f"/{action}/{neighbour + 1}"}
        for neighbour in room.connections
    ]
    # The current room's description already heads the page
    happened = [line for line in messages if line != room.description]
    recent = app.state.config.recent_messages
    return app.template(
        "play.gmi",
        room_number=room.id + 1,
        description=room.description,
        exits=exits,
        arrows=state.player.arrows,
        aim_mode=state.aim_mode,
        game_over=state.game_over,
        win=state.win,
        messages=happened,
        recent=state.message_log[-recent:] if recent > 0 else [],
    )


def _register_action_routes(app: Xitzin) -> None:
    """Register movement and shooting routes."""

    @app.gemini("/play", name="play")
    @require_certificate
    def play(request: Request):
        """Main game view."""
        game, _ = _game(request)
        return _render_play(app, game)

    @app.gemini("/move/{room}", name="move")
    @require_certificate
    def move(request: Request, room: str):
        """Walk into a neighbouring room."""
        game, fingerprint = _game(request)
        messages = game.move_player(_parse_room(room))
        logger.debug("move_requested", fingerprint=fingerprint, room=room)
        return _render_play(app, game, messages)

    @app.gemini("/aim", name="aim")
    @require_certificate
    def aim(request: Request):
        """Ready the bow; the exit links become targets."""
        game, _ = _game(request)
        return _render_play(app, game, game.enter_aim_mode())

    @app.gemini("/cancel", name="cancel")
    @require_certificate
    def cancel(request: Request):
        """Lower the bow without shooting."""
        game, _ = _game(request)
        game.exit_aim_mode()
        return Redirect("/play")

    @app.gemini("/shoot/{room}", name="shoot")
    @require_certificate
    def shoot(request: Request, room: str):
        """Loose an arrow into a neighbouring room."""
        game, fingerprint = _game(request)
        messages = game.shoot_arrow(_parse_room(room))
        state = game.snapshot()
        logger.info(
            "arrow_shot",
            fingerprint=fingerprint,
            room=room,
            arrows=state.player.arrows,
            win=state.win,
        )
        return _render_play(app, game, messages)


def _register_info_routes(app: Xitzin) -> None:
    """Register history and game management routes."""

    @app.gemini("/log", name="log")
    @require_certificate
    def log(request: Request):
        """Show the whole transcript of the current game."""
        game, _ = _game(request)
        return app.template("log.gmi", lines=game.snapshot().message_log)

    @app.input(
        "/new",
        prompt="Are you sure you want to start over? Type YES to confirm:",
        name="new_game",
    )
    @require_certificate
    def new_game(request: Request, query: str):
        """Reset game with confirmation."""
        if query.strip().upper() != "YES":
            return Redirect("/play")
        fingerprint = get_identity(request).fingerprint
        game = request.app.state.sessions.reset(fingerprint)
        return _render_play(app, game)


def register_routes(app: Xitzin) -> None:
    """Register gameplay routes."""
    _register_action_routes(app)
    _register_info_routes(app)
