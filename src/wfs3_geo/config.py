"""
Encoder settings.

Reads config from the WFS3_ENCODING_CONFIG env var (a YAML file).
A missing file means defaults. Settings only affect layout
(indentation, XML declaration), never the per-format rules.
"""

import os
from typing import Optional

import yaml
from pydantic import BaseModel

_settings = None


class EncoderSettings(BaseModel):
    """Layout options shared by all output formats."""

    model_config = {"frozen": True}

    indent: Optional[int] = None  # pretty-print JSON / XML when set
    xml_declaration: bool = True


def get_settings() -> EncoderSettings:
    """Singleton settings instance."""
    global _settings
    if _settings is None:
        config_path = os.environ.get(
            "WFS3_ENCODING_CONFIG", "config/encoding.yml"
        )
        _settings = load_settings(config_path)
    return _settings


def load_settings(config_path: str) -> EncoderSettings:
    """Load settings from a YAML file, falling back to defaults."""
    if not os.path.exists(config_path):
        return EncoderSettings()
    with open(config_path) as f:
        config = yaml.safe_load(f) or {}
    return EncoderSettings(**config.get("encoding", {}))


def set_settings(settings: EncoderSettings):
    """Override the settings instance (used for testing)."""
    global _settings
    _settings = settings


def reset_settings():
    """Reset the singleton settings (used for testing)."""
    global _settings
    _settings = None
