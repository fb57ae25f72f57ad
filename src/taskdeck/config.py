"""Configuration loader for taskdeck."""

from __future__ import annotations

import tempfile
import tomllib
from pathlib import Path

import tomlkit
from pydantic import BaseModel, Field, field_validator

from taskdeck.core.models.enums import TaskStatus
from taskdeck.paths import ensure_directories, get_config_path


class GeneralConfig(BaseModel):
    """General configuration settings."""

    default_status: TaskStatus = Field(
        default=TaskStatus.TODO,
        description="Column a new task starts in when no column is focused",
    )

    @field_validator("default_status", mode="before")
    @classmethod
    def validate_default_status(cls, value: object) -> object:
        """Gracefully coerce unknown statuses to TODO."""
        if isinstance(value, str):
            normalized = value.strip().lower()
            if normalized in {status.value for status in TaskStatus}:
                return normalized
            return TaskStatus.TODO
        return value


class UIConfig(BaseModel):
    """UI-related user preferences."""

    notification_timeout: float = Field(
        default=3.0, gt=0, description="Seconds a notice stays on screen"
    )
    show_tag_hints: bool = Field(
        default=True, description="Show the hint line under the tag toggles in the task form"
    )


class TaskdeckConfig(BaseModel):
    """Root configuration model."""

    general: GeneralConfig = Field(default_factory=GeneralConfig)
    ui: UIConfig = Field(default_factory=UIConfig)

    @classmethod
    def load(cls, config_path: Path | None = None) -> TaskdeckConfig:
        """Load configuration from TOML file or use defaults."""
        if config_path is None:
            ensure_directories()
            config_path = get_config_path()

        if config_path.exists():
            with open(config_path, "rb") as f:
                data = tomllib.load(f)
            return cls.model_validate(data)

        return cls()

    def save(self, path: Path) -> None:
        """Serialize current config to TOML file.

        Args:
            path: Path to write config file (created if missing)
        """
        doc = tomlkit.document()
        for section in ("general", "ui"):
            table = tomlkit.table()
            for key, value in getattr(self, section).model_dump(mode="json").items():
                if value is not None:
                    table[key] = value
            doc[section] = table

        _replace_file(path, tomlkit.dumps(doc))


def _replace_file(path: Path, content: str) -> None:
    """Write next to ``path`` and rename into place; readers never see a partial file."""
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp: Path | None = None
    try:
        with tempfile.NamedTemporaryFile(
            "w", encoding="utf-8", dir=path.parent, prefix=f".{path.name}.", delete=False
        ) as handle:
            tmp = Path(handle.name)
            handle.write(content)
        tmp.replace(path)
    except OSError:
        if tmp is not None:
            tmp.unlink(missing_ok=True)
        raise
