from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from .spark.errors import ConfigError

DEFAULT_API_URL = "https://api.ciscospark.com/v1"
DEFAULT_TIMEOUT = 20


def load_environment(env_file: str | None = None) -> bool:
    """Load environment variables from a .env file if present.

    Variables already set in the process environment take precedence.
    """
    env_path = Path(env_file or os.getenv("ENV_FILE", ".env")).expanduser()
    if not env_path.is_file():
        return False
    return load_dotenv(env_path, override=False)


@dataclass(frozen=True, slots=True)
class DeliveryConfig:
    auth_token: str
    room_id: str = ""
    room_name: str = ""
    message: str = ""
    api_url: str = DEFAULT_API_URL
    timeout: float = DEFAULT_TIMEOUT

    def __post_init__(self) -> None:
        if not self.auth_token:
            raise ConfigError("Missing required auth token (PLUGIN_AUTH_TOKEN).")
        if not self.timeout > 0:
            raise ConfigError(f"Timeout must be positive, got {self.timeout!r}.")

    @property
    def rooms_url(self) -> str:
        return f"{self.api_url.rstrip('/')}/rooms"

    @property
    def messages_url(self) -> str:
        return f"{self.api_url.rstrip('/')}/messages"

    def __repr__(self) -> str:
        return (
            f"DeliveryConfig(room_id={self.room_id!r}, room_name={self.room_name!r}, "
            f"api_url={self.api_url!r}, timeout={self.timeout!r})"
        )
