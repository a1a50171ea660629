"""
Environment-driven configuration for repocritic.
"""

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import load_dotenv

DEFAULT_MODEL = "gemini-1.5-flash"
DEFAULT_CACHE_TTL = 3600
DEFAULT_MAX_DEPTH = 25
DEFAULT_MAX_FILES = 1000
DEFAULT_HTTP_TIMEOUT = 30.0
DEFAULT_PORT = 5000


@dataclass
class Settings:
    """Runtime settings for the service, CLI and analysis pipeline."""
    gemini_api_key: Optional[str] = None
    github_token: Optional[str] = None
    gemini_model: str = DEFAULT_MODEL
    cache_ttl: int = DEFAULT_CACHE_TTL
    max_depth: Optional[int] = DEFAULT_MAX_DEPTH
    max_files: Optional[int] = DEFAULT_MAX_FILES
    http_timeout: float = DEFAULT_HTTP_TIMEOUT
    port: int = DEFAULT_PORT
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "Settings":
        """
        Build settings from environment variables.

        Args:
            env: Mapping to read from (defaults to os.environ)

        Returns:
            Settings instance

        Raises:
            ValueError: If a numeric variable cannot be parsed
        """
        if env is None:
            env = os.environ

        return cls(
            gemini_api_key=env.get("GEMINI_API_KEY") or None,
            github_token=env.get("GITHUB_TOKEN") or None,
            gemini_model=env.get("GEMINI_MODEL") or DEFAULT_MODEL,
            cache_ttl=_int_var(env, "REPOCRITIC_CACHE_TTL", DEFAULT_CACHE_TTL),
            max_depth=_limit_var(env, "REPOCRITIC_MAX_DEPTH", DEFAULT_MAX_DEPTH),
            max_files=_limit_var(env, "REPOCRITIC_MAX_FILES", DEFAULT_MAX_FILES),
            http_timeout=_float_var(env, "REPOCRITIC_HTTP_TIMEOUT", DEFAULT_HTTP_TIMEOUT),
            port=_int_var(env, "PORT", DEFAULT_PORT),
            log_level=(env.get("REPOCRITIC_LOG_LEVEL") or "INFO").upper(),
        )


def _int_var(env: Mapping[str, str], name: str, default: int) -> int:
    raw = env.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}")


def _float_var(env: Mapping[str, str], name: str, default: float) -> float:
    raw = env.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}")


def _limit_var(env: Mapping[str, str], name: str, default: int) -> Optional[int]:
    # 0 or a negative value disables the limit
    value = _int_var(env, name, default)
    return value if value > 0 else None


def load_settings() -> Settings:
    """Load a .env file if present, then read settings from the environment."""
    load_dotenv()
    return Settings.from_env()


def setup_logging(level: str = "INFO") -> None:
    """Configure root logging for the CLI and server."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
