"""Configuration loading from YAML + environment variables."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic_settings import BaseSettings, SettingsConfigDict

from techdraw.diagram.style import CANVAS_HEIGHT, CANVAS_WIDTH
from techdraw.types import DuplicateIdPolicy


class TechDrawConfig(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="TECHDRAW_", extra="ignore")

    # Server
    host: str = "127.0.0.1"
    port: int = 8350
    log_level: str = "INFO"

    # Instruction generation (Gemini)
    gemini_api_key: str = ""
    gemini_model: str = "gemini-2.5-pro"
    generation_temperature: float = 0.2
    generation_max_tokens: int = 8000

    # Drawing
    canvas_width: int = CANVAS_WIDTH
    canvas_height: int = CANVAS_HEIGHT
    show_grid: bool = True
    duplicate_ids: DuplicateIdPolicy = DuplicateIdPolicy.REPLACE

    @classmethod
    def from_yaml(cls, path: str | Path = "techdraw.yaml") -> TechDrawConfig:
        """Load config from YAML file, with env vars taking precedence."""
        yaml_path = Path(path)
        yaml_data: dict[str, Any] = {}

        if yaml_path.exists():
            with yaml_path.open("r", encoding="utf-8") as f:
                raw = yaml.safe_load(f) or {}
            yaml_data = _flatten_yaml(raw.get("techdraw", {}))

        # Keyword arguments outrank the environment, so drop YAML keys it sets
        env_keys = {key.upper() for key in os.environ}
        yaml_data = {
            key: value for key, value in yaml_data.items()
            if f"TECHDRAW_{key.upper()}" not in env_keys
        }
        return cls(**yaml_data)


def _flatten_yaml(data: dict, prefix: str = "") -> dict:
    """Flatten nested YAML into flat key-value pairs for Pydantic.

    ``{"gemini": {"model": "x"}}`` becomes ``{"gemini_model": "x"}``.
    """
    flat: dict[str, Any] = {}
    for key, value in data.items():
        full_key = f"{prefix}_{key}" if prefix else key
        if isinstance(value, dict):
            flat.update(_flatten_yaml(value, full_key))
        else:
            flat[full_key] = value
    return flat
