"""
Engine Settings

Loads process-level settings from environment variables and provides defaults.
Supports loading from a .env file using python-dotenv. Scoring tunables live in
RecommendationConfig; this module only says where to find data and config.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from .models.config import RecommendationConfig, load_config


@dataclass
class EngineSettings:
    """Engine process settings."""

    # JSON posts file for JsonContentRepository
    data_path: Optional[Path] = None
    # JSON interest profiles file for JsonInterestStore
    profiles_path: Optional[Path] = None
    # JSON RecommendationConfig; defaults are used when unset
    config_path: Optional[Path] = None
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, env_file: Optional[Path] = None) -> "EngineSettings":
        """Load settings from environment variables (and .env when present)."""
        if env_file is not None:
            load_dotenv(env_file)
        else:
            load_dotenv()

        def _path_env(key: str) -> Optional[Path]:
            v = os.getenv(key)
            return Path(v).expanduser() if v else None

        return cls(
            data_path=_path_env("DISCOVERY_DATA_PATH"),
            profiles_path=_path_env("DISCOVERY_PROFILES_PATH"),
            config_path=_path_env("DISCOVERY_CONFIG_PATH"),
            log_level=(os.getenv("DISCOVERY_LOG_LEVEL") or "INFO").upper(),
        )

    def validate(self) -> tuple[bool, list[str]]:
        """
        Validate the settings.

        Returns:
            (is_valid, list_of_errors)
        """
        errors = []
        for label, path in (
            ("Posts file", self.data_path),
            ("Profiles file", self.profiles_path),
            ("Config file", self.config_path),
        ):
            if path is not None and not path.exists():
                errors.append(f"{label} not found: {path}")
        if not isinstance(logging.getLevelName(self.log_level), int):
            errors.append(f"Unknown log level: {self.log_level}")
        return len(errors) == 0, errors

    def recommendation_config(self) -> RecommendationConfig:
        """The configured RecommendationConfig, or defaults when no file is set."""
        if self.config_path is None:
            return RecommendationConfig()
        return load_config(self.config_path)


# Global settings instance
_settings: Optional[EngineSettings] = None


def get_settings() -> EngineSettings:
    """Get the global settings instance."""
    global _settings
    if _settings is None:
        _settings = EngineSettings.from_env()
    return _settings


def reset_settings() -> None:
    """Forget the cached settings (tests, reloads)."""
    global _settings
    _settings = None
