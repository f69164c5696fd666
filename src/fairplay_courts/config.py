"""Configuration management for the FairPlay courts service."""

import json
import logging
import os
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

# Load environment variables
load_dotenv()

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://online.centrefairplay.ch"

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36"
)

# The vendor's fixed daily schedule, hourly at a 30 minute offset
DEFAULT_SLOT_TIMES = [f"{hour:02d}h30" for hour in range(8, 22)]

SITE_PATHS = {
    "ext": "tableau.php",
    "int": "tableau_int.php",
}


class Config:
    """Configuration manager with environment variables and file fallback."""

    def __init__(self, config_path: str | None = None):
        """Initialize configuration.

        Args:
            config_path: Path to configuration file (optional)
        """
        self.config_path = config_path or os.getenv(
            "FAIRPLAY_CONFIG_PATH", "config/config.json"
        )
        self._config_data: dict[str, Any] = {}
        self._load_config()

    def _load_config(self) -> None:
        """Load configuration from file if it exists."""
        config_file = Path(self.config_path)
        if config_file.exists():
            try:
                with open(config_file, encoding="utf-8") as f:
                    self._config_data = json.load(f)
            except (OSError, json.JSONDecodeError) as e:
                logger.warning(f"Failed to load config file {self.config_path}: {e}")
                self._config_data = {}

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value with priority: env vars > config file > default.

        Args:
            key: Configuration key
            default: Default value if not found

        Returns:
            Configuration value
        """
        # First check environment variables
        env_value = os.getenv(key.upper())
        if env_value is not None:
            return env_value

        # Then check config file
        if key in self._config_data:
            return self._config_data[key]

        # Return default
        return default

    @property
    def base_url(self) -> str:
        """Get the vendor origin, without trailing slash."""
        # FAIRPLAY_BASE is the variable name older deployments used
        url = self.get("FAIRPLAY_BASE_URL") or self.get(
            "FAIRPLAY_BASE", DEFAULT_BASE_URL
        )
        return str(url).rstrip("/")

    @property
    def site_paths(self) -> dict[str, str]:
        """Get the board page path for each site (overridable in the config file only)."""
        paths = dict(SITE_PATHS)
        paths.update(self._config_data.get("FAIRPLAY_SITE_PATHS") or {})
        return paths

    @property
    def slot_times(self) -> list[str]:
        """Get the fixed ordered list of board time labels (vendor form)."""
        value = self.get("FAIRPLAY_SLOT_TIMES")
        if not value:
            return list(DEFAULT_SLOT_TIMES)
        if isinstance(value, str):
            value = value.split(",")
        return [str(item).strip() for item in value if str(item).strip()]

    @property
    def max_hops(self) -> int:
        """Get the maximum number of day-bar pages walked per resolution."""
        return int(self.get("FAIRPLAY_MAX_HOPS", "10"))

    @property
    def request_timeout(self) -> int:
        """Get HTTP request timeout in seconds."""
        return int(self.get("FAIRPLAY_REQUEST_TIMEOUT", "30"))

    @property
    def user_agent(self) -> str:
        """Get the browser User-Agent sent to the vendor."""
        return self.get("FAIRPLAY_USER_AGENT", DEFAULT_USER_AGENT)

    @property
    def host(self) -> str:
        """Get the HTTP bind host."""
        return self.get("FAIRPLAY_HOST", "0.0.0.0")

    @property
    def port(self) -> int:
        """Get the HTTP bind port."""
        return int(self.get("FAIRPLAY_PORT", "8000"))

    @property
    def log_file(self) -> str | None:
        """Get the log file path, None logs to stderr."""
        return self.get("FAIRPLAY_LOG_FILE")

    @property
    def enable_debug_mode(self) -> bool:
        """Check if debug mode is enabled."""
        return str(self.get("FAIRPLAY_DEBUG", "false")).lower() == "true"

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary."""
        return {
            "base_url": self.base_url,
            "site_paths": self.site_paths,
            "slot_times": self.slot_times,
            "max_hops": self.max_hops,
            "request_timeout": self.request_timeout,
            "host": self.host,
            "port": self.port,
            "log_file": self.log_file,
            "enable_debug_mode": self.enable_debug_mode,
        }


# Global configuration instance
config = Config()
