"""Configuration management for the Market Console.

Loads configuration from environment variables and an optional .env file.
Environment variables always take precedence over .env values.
"""

import os
from pathlib import Path
from typing import Any, Optional

from .exceptions import MissingConfigError

DEFAULTS: dict[str, str] = {
    "API_BASE_URL": "http://localhost:5000",
    "LOG_LEVEL": "INFO",
    "APP_TITLE": "Market Console",
}


def find_env_file(start: Optional[Path] = None) -> Optional[Path]:
    """Find a .env file by walking up from ``start`` (default: this package).

    Stops at the first directory that looks like a project root
    (contains ``pyproject.toml`` or ``.git``).

    Returns:
        Path to the .env file if found, None otherwise
    """
    current_dir = (start or Path(__file__).parent).resolve()

    for parent in [current_dir] + list(current_dir.parents):
        env_path = parent / ".env"
        if env_path.is_file():
            return env_path
        if (parent / "pyproject.toml").exists() or (parent / ".git").exists():
            break

    return None


def parse_env_file(path: Path) -> dict[str, str]:
    """Parse KEY=VALUE lines, ignoring blanks, comments and malformed lines."""
    values: dict[str, str] = {}
    with open(path, "r", encoding="utf-8") as file:
        for line in file:
            line = line.strip()
            if not line or line.startswith("#") or "=" not in line:
                continue
            key, value = line.split("=", 1)
            values[key.strip()] = value.strip().strip('"').strip("'")
    return values


class Config:
    """Settings resolved from the environment, a .env file and defaults.

    Attribute access is case-insensitive: ``config.api_base_url`` and
    ``config.API_BASE_URL`` are the same value.
    """

    def __init__(self, env_file: Optional[str] = None, environ: Optional[dict[str, str]] = None):
        """Initialize configuration.

        Args:
            env_file: Optional path to a .env file. If not provided, one is
                      searched for in parent directories.
            environ: Mapping used instead of ``os.environ`` (tests).
        """
        self._environ = os.environ if environ is None else environ
        self._file_values: dict[str, str] = {}

        env_path = Path(env_file) if env_file else find_env_file()
        if env_path and env_path.is_file():
            self._file_values = {k.upper(): v for k, v in parse_env_file(env_path).items()}

    def __getattr__(self, name: str) -> str:
        if name.startswith("_"):
            raise AttributeError(f"'Config' object has no attribute '{name}'")

        key = name.upper()
        value = self._environ.get(key) or self._file_values.get(key) or DEFAULTS.get(key)
        if value is None:
            raise AttributeError(f"'Config' object has no attribute '{name}'")
        return value

    def get(self, name: str, default: Any = None) -> Any:
        try:
            return getattr(self, name)
        except AttributeError:
            return default

    def require(self, name: str) -> str:
        """Return a configuration value or raise MissingConfigError."""
        value = self.get(name)
        if not value:
            raise MissingConfigError(name.upper())
        return value

    @property
    def api_base_url(self) -> str:
        return self.require("API_BASE_URL").rstrip("/")


config = Config()
