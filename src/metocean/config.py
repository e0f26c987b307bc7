"""Environment-based configuration for the MetOcean client.

Settings are read from environment variables. A ``.env`` file in the
current working directory is loaded first, if present.

Variables:
    METOCEAN_API_KEY: API key sent with every request.
    METOCEAN_BASE_URL: Root URL of the API.
    METOCEAN_TIMEOUT: HTTP timeout in seconds.
    METOCEAN_VALIDATE_ARGS: Whether to validate arguments locally.

Usage:
    from metocean import MetOceanClient

    async with MetOceanClient.from_env() as client:
        ...
"""

import os
from dataclasses import dataclass, field
from typing import Optional

from dotenv import find_dotenv, load_dotenv

from .types import DEFAULT_BASE_URL, DEFAULT_TIMEOUT


def get_bool(key: str, default: bool = False) -> bool:
    """Get boolean from environment variable."""
    value = os.getenv(key, str(default)).lower()
    return value in ("true", "1", "yes", "on")


def get_float(key: str, default: float) -> float:
    """Get float from environment variable."""
    try:
        return float(os.getenv(key, str(default)))
    except (ValueError, TypeError):
        return default


@dataclass
class Settings:
    """Client settings loaded from environment."""

    api_key: Optional[str] = field(default_factory=lambda: os.getenv("METOCEAN_API_KEY"))
    base_url: str = field(
        default_factory=lambda: os.getenv("METOCEAN_BASE_URL", DEFAULT_BASE_URL)
    )
    timeout: float = field(
        default_factory=lambda: get_float("METOCEAN_TIMEOUT", DEFAULT_TIMEOUT)
    )
    validate_args: bool = field(
        default_factory=lambda: get_bool("METOCEAN_VALIDATE_ARGS", True)
    )


def load_settings(dotenv_path: Optional[str] = None) -> Settings:
    """Load a ``.env`` file, then build Settings from the environment.

    Variables already set in the environment win over the ``.env`` file.
    """
    load_dotenv(dotenv_path or find_dotenv(usecwd=True))
    return Settings()
