"""XDG-compliant path helpers for taskdeck."""

from __future__ import annotations

import os
from pathlib import Path

from platformdirs import user_config_dir, user_data_dir


def get_data_dir() -> Path:
    """Get the data directory for taskdeck (exported logs)."""
    override = os.environ.get("TASKDECK_DATA_DIR")
    if override:
        return Path(override)
    return Path(user_data_dir("taskdeck"))


def get_config_dir() -> Path:
    """Get the config directory for taskdeck (config.toml)."""
    override = os.environ.get("TASKDECK_CONFIG_DIR")
    if override:
        return Path(override)
    return Path(user_config_dir("taskdeck"))


def get_config_path() -> Path:
    """Get the path to the config file."""
    return get_config_dir() / "config.toml"


def get_log_export_path() -> Path:
    """Get the default target for debug log exports."""
    return get_data_dir() / "debug.log"


def ensure_directories() -> None:
    """Create the config and data directories if missing."""
    get_config_dir().mkdir(parents=True, exist_ok=True)
    get_data_dir().mkdir(parents=True, exist_ok=True)
