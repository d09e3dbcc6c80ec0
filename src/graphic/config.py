"""Configuration management for graphic using Pydantic models."""

import json
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

from graphic.models.colour import BLACK, WHITE, Colour

CONFIG_FILE_NAME = ".graphic.json"


class LogLevel(str, Enum):
    """Logging levels."""
    ERROR = "error"
    WARN = "warn"
    INFO = "info"
    DEBUG = "debug"


def _parse_colour(v):
    return Colour.parse(v)


class DisplayConfig(BaseModel):
    """Screen resolution used to map inches to drawing pixels."""
    x_dpi: float = Field(alias="xDpi", default=96.0)
    y_dpi: float = Field(alias="yDpi", default=96.0)

    @field_validator("x_dpi", "y_dpi")
    @classmethod
    def validate_dpi(cls, v):
        if v <= 0:
            raise ValueError("dpi must be > 0")
        return v

    model_config = ConfigDict(populate_by_name=True)


class ExportConfig(BaseModel):
    """Export settings store (image resolution and background colours)."""
    use_default_resolution: bool = Field(alias="useDefaultResolution", default=True)
    default_resolution: int = Field(alias="defaultResolution", default=96)
    custom_resolution: int = Field(alias="customResolution", default=300)
    jpg_bg_colour: Colour = Field(alias="jpgBgColour", default=WHITE)
    other_image_bg_colour: Colour = Field(alias="otherImageBgColour", default=WHITE)

    @field_validator("jpg_bg_colour", "other_image_bg_colour", mode="before")
    @classmethod
    def validate_colour(cls, v):
        return _parse_colour(v)

    @field_validator("default_resolution", "custom_resolution")
    @classmethod
    def validate_resolution(cls, v):
        if v < 1:
            raise ValueError("resolution must be >= 1")
        return v

    @property
    def effective_resolution(self) -> int:
        """Resolution an image exporter should use."""
        if self.use_default_resolution:
            return self.default_resolution
        return self.custom_resolution

    model_config = ConfigDict(populate_by_name=True)


class StyleParams(BaseModel):
    """Drawing attributes applied to a generated graph.

    Sizes of the graph and nodes are in inches, line widths in pixels,
    label sizes in points and rotation in degrees.
    """
    width: float = 2.0
    height: float = 2.0
    node_diameter: float = Field(alias="nodeDiameter", default=0.2)
    node_fill: Colour = Field(alias="nodeFill", default=WHITE)
    node_outline: Colour = Field(alias="nodeOutline", default=BLACK)
    node_thickness: float = Field(alias="nodeThickness", default=1.0)
    top_label: str = Field(alias="topLabel", default="")
    bottom_label: str = Field(alias="bottomLabel", default="")
    numbered_labels: bool = Field(alias="numberedLabels", default=False)
    label_start: int = Field(alias="labelStart", default=0)
    node_label_size: float = Field(alias="nodeLabelSize", default=12.0)
    edge_width: float = Field(alias="edgeWidth", default=1.0)
    edge_label: str = Field(alias="edgeLabel", default="")
    edge_label_size: float = Field(alias="edgeLabelSize", default=12.0)
    edge_colour: Colour = Field(alias="edgeColour", default=BLACK)
    rotation: float = 0.0

    @field_validator("node_fill", "node_outline", "edge_colour", mode="before")
    @classmethod
    def validate_colour(cls, v):
        return _parse_colour(v)

    @field_validator("node_diameter")
    @classmethod
    def validate_node_diameter(cls, v):
        if v <= 0:
            raise ValueError("node_diameter must be > 0")
        return v

    @field_validator("node_label_size")
    @classmethod
    def validate_node_label_size(cls, v):
        if v < 1:
            raise ValueError("node_label_size must be >= 1")
        return v

    model_config = ConfigDict(populate_by_name=True)


class LoggingConfig(BaseModel):
    """Logging configuration section."""
    level: LogLevel = LogLevel.WARN

    model_config = ConfigDict(use_enum_values=True)


class GraphicConfig(BaseModel):
    """Complete graphic configuration model."""
    display: DisplayConfig = Field(default_factory=DisplayConfig)
    export: ExportConfig = Field(default_factory=ExportConfig)
    style: StyleParams = Field(default_factory=StyleParams)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = ConfigDict(extra="forbid")


def load_config(config_path: str | Path | None = None) -> GraphicConfig:
    """Load configuration from file with fallback to defaults.

    Args:
        config_path: Optional path to configuration file. If None, searches
                    current directory and parents for .graphic.json

    Returns:
        GraphicConfig: Loaded and validated configuration

    Raises:
        ValueError: If configuration is invalid
    """
    if config_path is None:
        config_path = find_config_file()
    else:
        config_path = Path(config_path)

    if config_path and config_path.exists():
        try:
            with open(config_path, encoding="utf-8") as f:
                config_data = json.load(f)
            return GraphicConfig(**config_data)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in config file {config_path}: {e}")
        except Exception as e:
            raise ValueError(f"Failed to load config from {config_path}: {e}")
    return create_default_config()


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Find .graphic.json by searching up the directory tree.

    Args:
        start_dir: Directory to start search from (default: current directory)

    Returns:
        Path to config file if found, None otherwise
    """
    if start_dir is None:
        start_dir = Path.cwd()

    current = Path(start_dir).resolve()

    while True:
        config_file = current / CONFIG_FILE_NAME
        if config_file.exists():
            return config_file

        parent = current.parent
        if parent == current:  # Reached root directory
            break
        current = parent

    return None


def create_default_config() -> GraphicConfig:
    """Create default configuration."""
    return GraphicConfig()
