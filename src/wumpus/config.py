"""Configuration for Hunt the Wumpus."""

import os
from dataclasses import dataclass
from pathlib import Path


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.lower() in ("true", "1", "yes")


@dataclass
class Config:
    """Server configuration."""

    host: str = "localhost"
    port: int = 1965
    certfile: Path | None = None
    keyfile: Path | None = None
    log_level: str = "INFO"
    # Threshold for engine move and shot tracing; None follows log_level
    engine_log_level: str | None = None
    log_file: Path | None = None
    json_logs: bool = False
    hash_fingerprints: bool = True
    # Seeds every new game's random source; None draws fresh entropy
    seed: int | None = None
    recent_messages: int = 6
    max_sessions: int = 1000

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from WUMPUS_* environment variables."""
        certfile = os.getenv("WUMPUS_CERTFILE")
        keyfile = os.getenv("WUMPUS_KEYFILE")
        log_file = os.getenv("WUMPUS_LOG_FILE")
        seed = os.getenv("WUMPUS_SEED")

        return cls(
            host=os.getenv("WUMPUS_HOST", cls.host),
            port=int(os.getenv("WUMPUS_PORT", str(cls.port))),
            certfile=Path(certfile) if certfile else None,
            keyfile=Path(keyfile) if keyfile else None,
            log_level=os.getenv("WUMPUS_LOG_LEVEL", cls.log_level),
            engine_log_level=os.getenv("WUMPUS_ENGINE_LOG_LEVEL") or None,
            log_file=Path(log_file) if log_file else None,
            json_logs=_env_flag("WUMPUS_JSON_LOGS", False),
            hash_fingerprints=_env_flag("WUMPUS_HASH_FINGERPRINTS", True),
            seed=int(seed) if seed else None,
            recent_messages=int(
                os.getenv("WUMPUS_RECENT_MESSAGES", str(cls.recent_messages))
            ),
            max_sessions=int(os.getenv("WUMPUS_MAX_SESSIONS", str(cls.max_sessions))),
        )
