"""Configuration management for swiftlint-review."""
import json
from pathlib import Path

from pydantic import BaseModel, Field, field_validator

DEFAULT_CONFIG_NAME = ".swiftlint-review.json"


class Config(BaseModel):
    """Configuration for swiftlint-review with validation."""

    inline: bool = Field(default=False, description="Annotate lines instead of posting a table")
    directory: str | None = Field(default=None, description="Only lint paths with this prefix")
    config_file: str | None = Field(default=None, description="SwiftLint configuration file")
    linter: str = Field(default="swiftlint", description="SwiftLint executable")
    show_progress: bool = Field(default=False, description="Show progress bar")

    @field_validator("linter")
    @classmethod
    def validate_linter(cls, v: str) -> str:
        """Ensure the linter command is not blank."""
        if not v.strip():
            raise ValueError("linter cannot be an empty string")
        return v

    @field_validator("directory", "config_file")
    @classmethod
    def blank_to_none(cls, v: str | None) -> str | None:
        """Treat empty strings as unset."""
        if v is not None and not v.strip():
            return None
        return v


def get_default_config() -> Config:
    """Return default configuration."""
    return Config()


def load_config(config_path: Path) -> Config:
    """Load configuration from file or return defaults.

    Supports both snake_case (preferred) and camelCase keys.

    Args:
        config_path: Path to .swiftlint-review.json file

    Returns:
        Config object with loaded or default values

    Raises:
        ValueError: If the file is not valid JSON or values are invalid
    """
    if not config_path.exists():
        return get_default_config()

    with config_path.open(encoding="utf-8") as f:
        data = json.load(f)

    if not isinstance(data, dict):
        raise ValueError(f"Configuration in {config_path} must be a JSON object")

    defaults = get_default_config()

    config_data = {
        "inline": data.get("inline", defaults.inline),
        "directory": data.get("directory", defaults.directory),
        "config_file": data.get("config_file", data.get("configFile", defaults.config_file)),
        "linter": data.get("linter", defaults.linter),
        "show_progress": data.get(
            "show_progress", data.get("showProgress", defaults.show_progress)
        ),
    }

    return Config(**config_data)
