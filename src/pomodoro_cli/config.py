"""Configuration management for Pomodoro CLI.

Settings live in ``config.json`` under the platform config directory and are
validated with pydantic. A missing file is created with defaults on first run.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path

from platformdirs import user_config_dir
from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)


class TimerConfig(BaseModel):
    """Fallback values used when duration/session text can't be parsed."""

    work_minutes: int = Field(default=25, ge=1)
    setup_work_minutes: int = Field(
        default=30, ge=1, description="Work fallback for the interactive setup form"
    )
    break_minutes: int = Field(default=5, ge=1)
    sessions: int = Field(default=4, ge=1)


class AlertConfig(BaseModel):
    """Phase-transition alert configuration."""

    sound: bool = Field(default=True)
    notifications: bool = Field(default=True)
    title: str = Field(default="Pomodoro")
    timeout: int = Field(default=5, ge=1, description="Notification timeout (seconds)")


class PomodoroConfig(BaseModel):
    """Main configuration."""

    timer: TimerConfig = Field(default_factory=TimerConfig)
    alerts: AlertConfig = Field(default_factory=AlertConfig)


class ConfigService:
    """Loads and saves the Pomodoro CLI configuration file."""

    def __init__(self, config_dir: Path | None = None):
        self.config_dir = config_dir or Path(user_config_dir("pomodoro_cli"))
        self.config_path = self.config_dir / "config.json"
        self.config_dir.mkdir(parents=True, exist_ok=True)

        self._config: PomodoroConfig | None = None

    def load_config(self) -> PomodoroConfig:
        """Load configuration from disk, writing defaults on first run."""
        if self._config is not None:
            return self._config

        try:
            with open(self.config_path, encoding="utf-8") as f:
                self._config = PomodoroConfig.model_validate_json(f.read())
        except FileNotFoundError:
            logger.info("No config at %s, writing defaults", self.config_path)
            self._config = PomodoroConfig()
            self.save_config()
        except Exception as e:
            raise RuntimeError(f"Failed to load config: {e}") from e

        return self._config

    def save_config(self) -> None:
        """Save the current configuration to disk."""
        if self._config is None:
            raise RuntimeError("No configuration to save")

        try:
            self.config_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.config_path, "w", encoding="utf-8") as f:
                f.write(self._config.model_dump_json(indent=4))
        except Exception as e:
            raise RuntimeError(f"Failed to save config: {e}") from e


@lru_cache(maxsize=1)
def get_config_service() -> ConfigService:
    """Return the shared ConfigService instance."""
    return ConfigService()
