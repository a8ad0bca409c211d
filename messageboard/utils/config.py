"""
Runtime settings for the message board.

Values come from MESSAGEBOARD_* environment variables, falling back to the
defaults below. Command-line flags in messageboard.main take precedence.
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .logging import LOG_FORMATS

ENV_PREFIX = "MESSAGEBOARD_"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class Settings:
    # 0.0.0.0 exposes the board on every interface; opt in explicitly
    host: str = "127.0.0.1"
    port: int = 3000
    static_dir: str = "client/build"
    log_level: str = "INFO"
    log_format: str = "console"

    def __post_init__(self):
        if not 0 < self.port < 65536:
            raise ValueError(f"port out of range: {self.port}")
        self.log_level = self.log_level.upper()
        if self.log_level not in LOG_LEVELS:
            raise ValueError(f"unknown log level {self.log_level!r}, expected one of {LOG_LEVELS}")
        if self.log_format not in LOG_FORMATS:
            raise ValueError(f"unknown log format {self.log_format!r}, expected one of {LOG_FORMATS}")


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """
    Build Settings from the environment.

    Args:
        environ: Mapping to read from. Defaults to os.environ.

    Raises:
        ValueError: If a variable holds an invalid value.
    """
    env = os.environ if environ is None else environ
    defaults = Settings()

    def get(name: str, default: str) -> str:
        return env.get(ENV_PREFIX + name, default)

    raw_port = get("PORT", str(defaults.port))
    try:
        port = int(raw_port)
    except ValueError:
        raise ValueError(f"{ENV_PREFIX}PORT must be an integer, got {raw_port!r}") from None

    return Settings(
        host=get("HOST", defaults.host),
        port=port,
        static_dir=get("STATIC_DIR", defaults.static_dir),
        log_level=get("LOG_LEVEL", defaults.log_level),
        log_format=get("LOG_FORMAT", defaults.log_format),
    )
