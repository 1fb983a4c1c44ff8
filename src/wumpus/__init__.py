"""Hunt the Wumpus over Gemini."""

from .app import create_app
from .config import Config
from .logging import close_logging, configure_logging, get_logger

__all__ = ["main", "create_app", "Config"]


def main() -> None:
    """Serve the game until interrupted, using WUMPUS_* settings."""
    config = Config.from_env()
    configure_logging(
        log_level=config.log_level,
        log_file=config.log_file,
        json_logs=config.json_logs,
        hash_fingerprints=config.hash_fingerprints,
        engine_log_level=config.engine_log_level,
    )
    logger = get_logger(__name__)

    try:
        app = create_app(config)
        logger.info(
            "server_starting",
            address=f"{config.host}:{config.port}",
            tls=config.certfile is not None,
            seeded=config.seed is not None,
            max_sessions=config.max_sessions,
        )
        app.run(
            host=config.host,
            port=config.port,
            certfile=str(config.certfile) if config.certfile else None,
            keyfile=str(config.keyfile) if config.keyfile else None,
        )
    finally:
        logger.info("server_stopped")
        close_logging()
