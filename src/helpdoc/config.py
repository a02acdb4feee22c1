"""Application configuration: settings schema and config.yaml loader"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field

from helpdoc.render.style import RenderStyle


CONFIG_FILE = "config.yaml"
ENV_PREFIX = "HELPDOC_"
DEFAULT_HELP_DIRS = [".", "docs", "Doc", "Documentation", "Resources"]


class Settings(BaseModel):
    app_name:      str = "helpdoc"
    parser_preset: str = Field(default="commonmark", description="MarkdownIt preset name for the native renderer")
    renderer:      str = Field(default="native", pattern="^(native|blocks)$", description="native or blocks")
    help_file:     str = Field(default="HELP.md", description="File name of the bundled help document")
    help_dirs:     list[str] = Field(default_factory=lambda: list(DEFAULT_HELP_DIRS),
                                     description="Directories searched for help_file, in order")
    log_level:     str = Field(default="WARNING", pattern="^(DEBUG|INFO|WARNING|ERROR)$")
    style:         RenderStyle = Field(default_factory=RenderStyle)


def _env_value(name: str, val: str) -> Any:
    """Coerce an env var string for list fields; pydantic handles scalars."""
    if name == "help_dirs":
        return [d for d in val.split(os.pathsep) if d]
    return val


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from config.yaml, then HELPDOC_<FIELD> env vars, then non-None CLI overrides."""
    data: dict[str, Any] = {}
    if Path(CONFIG_FILE).exists():
        try:
            data = yaml.safe_load(Path(CONFIG_FILE).read_text()) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid {CONFIG_FILE}: {e}") from e
        if not isinstance(data, dict):
            raise ValueError(f"Invalid {CONFIG_FILE}: expected a mapping, got {type(data).__name__}")

    for name in Settings.model_fields:
        if name == "style":
            continue
        if val := os.getenv(f"{ENV_PREFIX}{name.upper()}"):
            data[name] = _env_value(name, val)

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    return Settings(**data)
