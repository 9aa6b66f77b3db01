"""Application configuration: settings schema and config.yaml loader"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field


CONFIG_FILE = "config.yaml"
ENV_PREFIX = "MDVIEW_"


class Settings(BaseModel):
    app_name:           str  = "mdview"
    parser_config:      str  = Field(default="gfm-like", description="MarkdownIt parser preset name")
    indent_unit:        int  = Field(default=4, ge=1, le=8, description="Spaces per nesting level in block bodies")
    dedent:             bool = Field(default=True,  description="Dedent non-code content after block extraction")
    enable_anchors:     bool = Field(default=True,  description="Render heading ids and anchor links")
    front_matter:       bool = Field(default=True,  description="Split a leading YAML front matter block")
    code_style:         str  = Field(default="default", description="Pygments style for highlighted code")
    line_numbers_after: int  = Field(default=5, ge=0, description="Show line numbers for code longer than this; 0 disables")
    asset_base:         str  = Field(default="/docs", description="URL prefix for relative asset references")
    language:           str  = Field(default="en", description="Document locale used in asset paths")
    log_level:          str  = Field(default="WARNING", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from config.yaml, then MDVIEW_<FIELD> env vars, then non-None CLI overrides."""
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
    try:
        return Settings(**data)
    except ValueError as e:
        raise ValueError(f"Invalid settings: {e}") from e
