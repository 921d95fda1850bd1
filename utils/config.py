"""Configuration management utilities for the monuments explorer.

Provides:
- A Config base class with dict/JSON round-tripping
- AppConfig, the environment-driven application settings
- Known constants shared by the engine and the routes
"""

from pathlib import Path
from typing import Dict, Any
import json
import os as _os


# Owner values containing this text are legislative designations
# ("Congress", "Congress (NPS)") rather than presidents.
DEFAULT_LEGISLATIVE_MARKER = "Congress"

# "exact": a state key matches a record when it equals one of the trimmed
# names in its region list.  "substring": the key may appear anywhere in the
# raw region text, so "Virginia" also matches "West Virginia".
STATE_MATCH_MODES = frozenset({"exact", "substring"})

DEFAULT_PORTRAIT_URL = (
    "https://www.loc.gov/static/portals/free-to-use/public-domain/"
    "presidential-portraits/99-{last}.jpg"
)


class Config:
    """Base configuration class for organizing application settings."""

    def __init__(self):
        """Initialize configuration with default values."""
        pass

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary.

        Returns:
            Dictionary of all config attributes
        """
        return {k: v for k, v in self.__dict__.items() if not k.startswith("_")}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Config":
        """Create config from dictionary.

        Args:
            data: Configuration dictionary

        Returns:
            Config instance with values from dictionary
        """
        config = cls()
        for key, value in data.items():
            setattr(config, key, value)
        return config

    def save_json(self, path: Path) -> None:
        """Save configuration to JSON file.

        Args:
            path: Path to save configuration file
        """
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w") as f:
            json.dump(self.to_dict(), f, indent=2, default=str)

    @classmethod
    def load_json(cls, path: Path) -> "Config":
        """Load configuration from JSON file.

        Raises:
            FileNotFoundError: If file doesn't exist
            json.JSONDecodeError: If file is not valid JSON
        """
        with open(path, "r") as f:
            data = json.load(f)
        return cls.from_dict(data)


class AppConfig(Config):
    """Application-level configuration loaded from environment variables.

    All env vars have sensible defaults so the site works out of the box
    next to a ``monuments.sqlite3`` file.

    Environment variables:
        APP_DB_PATH: Path to the SQLite database file (default: monuments.sqlite3)
        APP_PORT: Server port (default: 8080)
        APP_HOST: Server bind address (default: 127.0.0.1)
        APP_LOG_FORMAT: Logging format, "text" or "json" (default: text)
        APP_CORS_ORIGINS: Comma-separated allowed origins for /api (default: *)
        APP_STATE_MATCH: "exact" or "substring" state matching (default: exact)
        APP_LEGISLATIVE_MARKER: Owner text that marks a non-president (default: Congress)
        APP_PORTRAIT_URL: Portrait URL pattern with a {last} placeholder
    """

    def __init__(self) -> None:
        super().__init__()
        self.db_path = Path(_os.getenv("APP_DB_PATH", "monuments.sqlite3"))
        self.api_port = int(_os.getenv("APP_PORT", "8080"))
        self.api_host = _os.getenv("APP_HOST", "127.0.0.1")
        self.log_format = _os.getenv("APP_LOG_FORMAT", "text")
        raw_origins = _os.getenv("APP_CORS_ORIGINS", "*")
        self.cors_origins: list[str] = (
            ["*"] if raw_origins == "*"
            else [o.strip() for o in raw_origins.split(",") if o.strip()]
        )
        self.state_match = _os.getenv("APP_STATE_MATCH", "exact").strip().lower()
        if self.state_match not in STATE_MATCH_MODES:
            raise ValueError(
                f"APP_STATE_MATCH must be one of {sorted(STATE_MATCH_MODES)}, "
                f"got '{self.state_match}'"
            )
        self.legislative_marker = _os.getenv(
            "APP_LEGISLATIVE_MARKER", DEFAULT_LEGISLATIVE_MARKER
        )
        self.portrait_url = _os.getenv("APP_PORTRAIT_URL", DEFAULT_PORTRAIT_URL)

    @classmethod
    def from_env(cls) -> "AppConfig":
        """Create an AppConfig instance populated from environment variables."""
        return cls()
