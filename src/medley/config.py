"""
Configuration - defaults used when building notes from the tool surface.

Configuration comes from:
1. Built-in defaults (MedleyConfig())
2. An optional YAML file passed to load_config / the --config flag

Example YAML:

    reference_pitch: 442.0
    default_octave: 3
    default_volume: 100
    default_value: crotchet
    default_dots: 1
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, field_validator

from medley.constants import (
    A440,
    DEFAULT_DOTS,
    DEFAULT_OCTAVE,
    DEFAULT_VOLUME,
    DOTS_MAX,
    DOTS_MIN,
    VOLUME_MAX,
    VOLUME_MIN,
)
from medley.core.duration import Duration, NoteValue

logger = logging.getLogger(__name__)

# Environment variable the server reads the config path from
CONFIG_ENV = "MEDLEY_CONFIG"


class MedleyConfig(BaseModel):
    """Library-wide defaults."""

    reference_pitch: float = Field(
        A440, gt=0, description="Reference pitch in Hz for semitone-distance conversions"
    )
    default_octave: int = Field(DEFAULT_OCTAVE, description="Octave used when notation omits it")
    default_volume: int = Field(
        DEFAULT_VOLUME, ge=VOLUME_MIN, le=VOLUME_MAX, description="Volume for new notes (0-127)"
    )
    default_value: NoteValue = Field(NoteValue.MINIM, description="Note value for new notes")
    default_dots: int = Field(
        DEFAULT_DOTS, ge=DOTS_MIN, le=DOTS_MAX, description="Dots for new notes (0-3)"
    )

    model_config = {"frozen": True, "extra": "forbid"}

    @field_validator("default_value", mode="before")
    @classmethod
    def parse_default_value(cls, v: Any) -> Any:
        """Accept note value names like 'crotchet'."""
        if isinstance(v, str):
            return NoteValue.parse(v)
        return v

    @property
    def default_duration(self) -> Duration:
        """Duration for new notes."""
        return Duration(self.default_value, self.default_dots)


def load_config(path: Path | None = None) -> MedleyConfig:
    """
    Load configuration from a YAML file.

    Args:
        path: YAML file, or None for built-in defaults

    Returns:
        MedleyConfig

    Raises:
        FileNotFoundError: If path does not exist
        ValueError: If the file is not YAML or not a mapping
        pydantic.ValidationError: If a value is invalid or a key is unknown
    """
    if path is None:
        return MedleyConfig()

    with open(path) as f:
        try:
            data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Config file is not valid YAML: {path}: {e}") from e

    if not isinstance(data, dict):
        raise ValueError(f"Config file must contain a mapping: {path}")

    config = MedleyConfig(**data)
    logger.debug(f"Loaded config from {path}: {config}")
    return config
