"""User settings for the wn client"""

import os
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from ..constants import (
    APP_NAME,
    DEFAULT_BRANCH,
    DEFAULT_GIT_USER,
    DEFAULT_NOTIFY_HELPER,
    ENV_CONFIG_PATH,
    ENV_LOG_LEVEL,
    ENV_TESTING,
    SETTINGS_DIR,
    SETTINGS_FILE,
)
from ..exceptions import SettingsError


@dataclass
class Settings:
    """Client settings, read from ~/.webbynode/config.yml"""

    program_name: str = APP_NAME
    git_user: str = DEFAULT_GIT_USER
    branch: str = DEFAULT_BRANCH
    notifications: bool = True
    notify_helper: str = DEFAULT_NOTIFY_HELPER
    notify_image: Optional[str] = None
    testing: bool = False
    log_level: str = "WARNING"

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Settings':
        """Create from dictionary, ignoring unknown keys"""
        known = {k: v for k, v in data.items() if k in cls.__dataclass_fields__}
        return cls(**known)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return asdict(self)


def settings_path() -> Path:
    """Location of the settings file"""
    custom = os.environ.get(ENV_CONFIG_PATH)
    if custom:
        return Path(custom).expanduser()
    return Path(SETTINGS_DIR).expanduser() / SETTINGS_FILE


def load_settings(path: Optional[Path] = None) -> Settings:
    """
    Load settings from YAML, falling back to defaults

    Environment variables are expanded inside the file. WEBBYNODE_TESTING
    and WEBBYNODE_LOG_LEVEL override the file.

    Args:
        path: Settings file (defaults to settings_path())

    Returns:
        Loaded settings

    Raises:
        SettingsError: If the file exists but cannot be read or parsed
    """
    path = path or settings_path()
    data: Dict[str, Any] = {}

    if path.exists():
        try:
            with open(path, 'r') as f:
                content = os.path.expandvars(f.read())
            data = yaml.safe_load(content) or {}
        except (OSError, yaml.YAMLError) as e:
            raise SettingsError(f"Failed to load settings from {path}: {e}") from e

        if not isinstance(data, dict):
            raise SettingsError(f"Settings file {path} must contain a mapping")

    settings = Settings.from_dict(data)

    if os.environ.get(ENV_TESTING, "").lower() in ("1", "true", "yes"):
        settings.testing = True

    log_level = os.environ.get(ENV_LOG_LEVEL)
    if log_level:
        settings.log_level = log_level.upper()

    return settings
