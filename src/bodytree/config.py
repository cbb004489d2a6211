"""Application configuration: settings schema and config.yaml loader"""

import os
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import BaseModel, Field


CONFIG_FILE = "config.yaml"
ENV_PREFIX = "BODYTREE_"


class Settings(BaseModel):
    app_name:           str = "bodytree"
    featured_image_url: Optional[str] = Field(default=None, description="Image already shown by the caller; suppressed wherever it recurs")
    image_key:          str = Field(default="featured_image", description="Frontmatter key holding an article's featured image")
    output_dir:         str = Field(default="dist", description="Directory for converted JSON/YAML trees")
    output_format:      str = Field(default="json", pattern="^(json|yaml)$", description="json or yaml")
    log_level:          str = Field(default="WARNING", pattern="^(DEBUG|INFO|WARNING|ERROR)$", description="Console log level")


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from config.yaml, then BODYTREE_<FIELD> env vars, then non-None CLI overrides."""
    data: dict[str, Any] = {}
    if Path(CONFIG_FILE).exists():
        try:
            data = yaml.safe_load(Path(CONFIG_FILE).read_text()) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid {CONFIG_FILE}: {e}") from e
        if not isinstance(data, dict):
            raise ValueError(f"Invalid {CONFIG_FILE}: expected a mapping, got {type(data).__name__}")

    for name in Settings.model_fields:
        if val := os.getenv(f"{ENV_PREFIX}{name.upper()}"):
            data[name] = val

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    return Settings(**data)
