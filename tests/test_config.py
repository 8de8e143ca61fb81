"""
Tests for configuration loading.
"""

from pathlib import Path

import pytest
from pydantic import ValidationError

from medley.config import MedleyConfig, load_config
from medley.core.duration import Duration, NoteValue


class TestMedleyConfig:
    """Tests for the config model."""

    def test_defaults(self, config: MedleyConfig) -> None:
        """Defaults match the library defaults."""
        assert config.reference_pitch == 440.0
        assert config.default_octave == 4
        assert config.default_volume == 98
        assert config.default_value is NoteValue.MINIM
        assert config.default_dots == 0

    def test_default_duration(self) -> None:
        """default_duration combines value and dots."""
        config = MedleyConfig(default_value="crotchet", default_dots=1)
        assert config.default_duration == Duration(NoteValue.CROTCHET, 1)

    def test_invalid_volume(self) -> None:
        """Volume must be 0-127."""
        with pytest.raises(ValidationError):
            MedleyConfig(default_volume=200)

    def test_invalid_dots(self) -> None:
        """Dots must be 0-3."""
        with pytest.raises(ValidationError):
            MedleyConfig(default_dots=4)

    def test_invalid_value_name(self) -> None:
        """Unknown note values are rejected."""
        with pytest.raises(ValidationError):
            MedleyConfig(default_value="eighth")

    def test_frozen(self, config: MedleyConfig) -> None:
        """Config is immutable."""
        with pytest.raises(ValidationError):
            config.default_octave = 3  # type: ignore[misc]


class TestLoadConfig:
    """Tests for YAML loading."""

    def test_no_path(self) -> None:
        """No path gives defaults."""
        assert load_config() == MedleyConfig()

    def test_load_yaml(self, temp_dir: Path) -> None:
        """Values are read from YAML."""
        path = temp_dir / "medley.yaml"
        path.write_text(
            "reference_pitch: 442.0\n"
            "default_octave: 3\n"
            "default_value: quaver\n"
            "default_dots: 2\n"
        )
        config = load_config(path)
        assert config.reference_pitch == 442.0
        assert config.default_octave == 3
        assert config.default_duration == Duration(NoteValue.QUAVER, 2)
        assert config.default_volume == 98

    def test_empty_file(self, temp_dir: Path) -> None:
        """An empty file gives defaults."""
        path = temp_dir / "empty.yaml"
        path.write_text("")
        assert load_config(path) == MedleyConfig()

    def test_unknown_key(self, temp_dir: Path) -> None:
        """Unknown keys are rejected."""
        path = temp_dir / "bad.yaml"
        path.write_text("tempo: 120\n")
        with pytest.raises(ValidationError):
            load_config(path)

    def test_not_a_mapping(self, temp_dir: Path) -> None:
        """The top level must be a mapping."""
        path = temp_dir / "list.yaml"
        path.write_text("- 1\n- 2\n")
        with pytest.raises(ValueError, match="mapping"):
            load_config(path)

    def test_invalid_yaml(self, temp_dir: Path) -> None:
        """Malformed YAML raises ValueError naming the file."""
        path = temp_dir / "broken.yaml"
        path.write_text("default_octave: [3\n")
        with pytest.raises(ValueError, match="not valid YAML"):
            load_config(path)

    def test_missing_file(self, temp_dir: Path) -> None:
        """A missing file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            load_config(temp_dir / "missing.yaml")
