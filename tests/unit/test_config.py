"""Unit tests for configuration management."""

import json
from pathlib import Path
from tempfile import TemporaryDirectory
from unittest.mock import patch

import pytest

from graphic.config import (
    DisplayConfig,
    ExportConfig,
    GraphicConfig,
    LogLevel,
    StyleParams,
    create_default_config,
    find_config_file,
    load_config,
)
from graphic.models import Colour


class TestSections:
    """Test the individual configuration sections."""

    def test_display_defaults(self):
        """Test default screen resolution."""
        display = DisplayConfig()
        assert display.x_dpi == 96
        assert display.y_dpi == 96

    def test_display_aliases(self):
        """Test camelCase keys."""
        display = DisplayConfig(**{"xDpi": 72, "yDpi": 144})
        assert (display.x_dpi, display.y_dpi) == (72, 144)

    def test_display_rejects_zero(self):
        """Test DPI validation."""
        with pytest.raises(ValueError):
            DisplayConfig(x_dpi=0)

    def test_export_effective_resolution(self):
        """Test choosing between default and custom resolution."""
        assert ExportConfig().effective_resolution == 96
        export = ExportConfig(useDefaultResolution=False, customResolution=600)
        assert export.effective_resolution == 600

    def test_export_colours(self):
        """Test background colours from JSON-friendly values."""
        export = ExportConfig(jpgBgColour="#000000", otherImageBgColour=[1, 2, 3])
        assert export.jpg_bg_colour == Colour(0, 0, 0)
        assert export.other_image_bg_colour == Colour(1, 2, 3)

    def test_export_rejects_bad_resolution(self):
        """Test resolution validation."""
        with pytest.raises(ValueError):
            ExportConfig(defaultResolution=0)

    def test_style_defaults(self):
        """Test default drawing attributes."""
        params = StyleParams()
        assert (params.width, params.height, params.node_diameter) == (2.0, 2.0, 0.2)
        assert params.node_fill == Colour(255, 255, 255)
        assert params.node_outline == Colour(0, 0, 0)
        assert params.numbered_labels is False

    def test_style_rejects_bad_values(self):
        """Test node size and label size validation."""
        with pytest.raises(ValueError):
            StyleParams(node_diameter=0)
        with pytest.raises(ValueError):
            StyleParams(nodeLabelSize=0.5)
        with pytest.raises(ValueError):
            StyleParams(nodeFill="chartreuse-ish")


class TestGraphicConfig:
    """Test the complete configuration model."""

    def test_config_from_dict(self):
        """Test config creation from dictionary."""
        config = GraphicConfig(**{
            "display": {"xDpi": 120},
            "style": {"width": 3, "nodeFill": "255,0,0", "numberedLabels": True},
            "logging": {"level": "debug"},
        })
        assert config.display.x_dpi == 120
        assert config.style.width == 3
        assert config.style.node_fill == Colour(255, 0, 0)
        assert config.style.numbered_labels is True
        assert config.logging.level == LogLevel.DEBUG.value

    def test_config_extra_fields_forbidden(self):
        """Test that extra fields are rejected."""
        with pytest.raises(ValueError):
            GraphicConfig(invalid_field="should-fail")

    def test_dump_round_trip(self):
        """Test that a dumped config loads back."""
        config = GraphicConfig(style={"edgeColour": "#0000ff"})
        again = GraphicConfig(**json.loads(config.model_dump_json(by_alias=True)))
        assert again.style.edge_colour == Colour(0, 0, 255)


class TestConfigFileOperations:
    """Test configuration file loading and discovery."""

    def test_load_config_with_file(self):
        """Test loading config from existing file."""
        with TemporaryDirectory() as temp_dir:
            config_file = Path(temp_dir) / ".graphic.json"
            with open(config_file, "w") as f:
                json.dump({"style": {"height": 4}}, f)

            config = load_config(config_file)
            assert config.style.height == 4

    def test_load_config_file_not_found(self):
        """Test loading config when file doesn't exist."""
        with TemporaryDirectory() as temp_dir:
            config = load_config(Path(temp_dir) / "nonexistent.json")
            assert config.display.x_dpi == 96

    def test_load_config_invalid_json(self):
        """Test loading config with invalid JSON."""
        with TemporaryDirectory() as temp_dir:
            config_file = Path(temp_dir) / ".graphic.json"
            config_file.write_text("{invalid json")

            with pytest.raises(ValueError, match="Invalid JSON"):
                load_config(config_file)

    def test_load_config_invalid_structure(self):
        """Test loading config with invalid structure."""
        with TemporaryDirectory() as temp_dir:
            config_file = Path(temp_dir) / ".graphic.json"
            config_file.write_text(json.dumps({"invalid": "structure"}))

            with pytest.raises(ValueError, match="Failed to load config"):
                load_config(config_file)

    def test_find_config_file_parent_dir(self):
        """Test finding config file in parent directory."""
        with TemporaryDirectory() as temp_dir:
            temp_path = Path(temp_dir)
            config_file = temp_path / ".graphic.json"
            config_file.touch()

            sub_dir = temp_path / "a" / "b"
            sub_dir.mkdir(parents=True)

            assert find_config_file(sub_dir) == config_file.resolve()

    def test_zero_config_operation(self):
        """Test zero-config operation with defaults."""
        with patch("graphic.config.find_config_file", return_value=None):
            config = load_config()
            assert config == create_default_config()
