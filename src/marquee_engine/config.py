"""
Marquee Configuration
=====================

This module handles configuration loading for the marquee tool.

Configuration Sources (in order of precedence):
    1. Command-line flags (applied by the CLI on top of the loaded settings)
    2. Environment variables
    3. marquee.yaml file
    4. Default values (lowest priority)

Environment Variable Mapping:
    MARQUEE_WIDTH       -> render.width
    MARQUEE_DELAY_MS    -> render.delay_ms
    MARQUEE_SEPARATOR   -> render.separator
    MARQUEE_PREFIX      -> decoration.prefix
    MARQUEE_SUFFIX      -> decoration.suffix
    MARQUEE_JSON        -> input.json
    MARQUEE_LOG_LEVEL   -> logging.level
    MARQUEE_LOG_FORMAT  -> logging.format

Example:
    from marquee_engine.config import load_config, setup_logging

    settings = load_config()
    setup_logging(settings)
    print(settings.render.width)
"""

import os
import logging
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field


logger = logging.getLogger(__name__)


_TRUE_VALUES = {"1", "true", "yes", "on"}


# =============================================================================
# Configuration Models
# =============================================================================

class RenderConfig(BaseModel):
    """Window and animation configuration."""

    width: int = Field(
        default=20,
        ge=0,
        description="Width of the moving window in characters (decoration excluded)",
    )
    delay_ms: int = Field(
        default=1000,
        ge=0,
        description="Milliseconds to wait between frames",
    )
    separator: str = Field(
        default="    ",
        description="Text placed between the end of the content and its restart",
    )
    reverse: bool = Field(default=False, description="Scroll in the opposite direction")
    loop: bool = Field(
        default=True,
        description="Loop forever (False = a single pass per marquee)",
    )
    same_line: bool = Field(
        default=False,
        description="Redraw every frame on the same terminal line using \\r",
    )
    multi_line: bool = Field(
        default=False,
        description="Keep every input line as its own marquee instead of replacing",
    )


class DecorationConfig(BaseModel):
    """Global static text printed around every frame."""

    prefix: str = Field(default="", description="Printed before every frame")
    suffix: str = Field(default="", description="Printed after every frame")


class InputConfig(BaseModel):
    """Input decoding configuration."""

    json_records: bool = Field(
        default=False,
        alias="json",
        description="Decode each input line as a JSON marquee record",
    )

    model_config = {"populate_by_name": True}


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="WARNING", description="Log level")
    format: str = Field(default="text", description="Log format: json or text")


class Settings(BaseModel):
    """
    Main settings class for the marquee tool.

    Loads configuration from YAML file and environment variables.
    Environment variables take precedence over file values.
    """

    render: RenderConfig = Field(default_factory=RenderConfig)
    decoration: DecorationConfig = Field(default_factory=DecorationConfig)
    input: InputConfig = Field(default_factory=InputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


# =============================================================================
# Configuration Loading
# =============================================================================

def load_config(config_path: Optional[str] = None) -> Settings:
    """
    Load configuration from YAML file and environment variables.

    Priority (highest to lowest):
        1. Environment variables
        2. YAML config file
        3. Default values

    Args:
        config_path: Path to marquee.yaml. If None, searches common locations.

    Returns:
        Settings: Loaded configuration

    Raises:
        FileNotFoundError: If config_path is given but does not exist
        pydantic.ValidationError: If the merged values are invalid
    """
    if config_path is not None and not Path(config_path).exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    # Find config file
    if config_path is None:
        search_paths = [
            Path("marquee.yaml"),
            Path("marquee.yml"),
            Path.home() / ".config" / "marquee" / "config.yaml",
        ]
        for path in search_paths:
            if path.exists():
                config_path = str(path)
                break

    # Load from YAML if exists
    config_data = {}
    if config_path:
        logger.info(f"Loading config from: {config_path}")
        with open(config_path, "r") as f:
            config_data = yaml.safe_load(f) or {}
    else:
        logger.debug("No config file found, using defaults and environment variables")

    # Apply environment variable overrides
    _apply_env_overrides(config_data)

    return Settings.model_validate(config_data)


def _apply_env_overrides(config_data: dict) -> None:
    """Apply environment variable overrides to config data."""

    # Render settings
    if env_width := os.environ.get("MARQUEE_WIDTH"):
        config_data.setdefault("render", {})["width"] = int(env_width)
    if env_delay := os.environ.get("MARQUEE_DELAY_MS"):
        config_data.setdefault("render", {})["delay_ms"] = int(env_delay)
    if (env_sep := os.environ.get("MARQUEE_SEPARATOR")) is not None:
        config_data.setdefault("render", {})["separator"] = env_sep

    # Decoration settings
    if (env_prefix := os.environ.get("MARQUEE_PREFIX")) is not None:
        config_data.setdefault("decoration", {})["prefix"] = env_prefix
    if (env_suffix := os.environ.get("MARQUEE_SUFFIX")) is not None:
        config_data.setdefault("decoration", {})["suffix"] = env_suffix

    # Input settings
    if env_json := os.environ.get("MARQUEE_JSON"):
        config_data.setdefault("input", {})["json"] = env_json.lower() in _TRUE_VALUES

    # Logging settings
    if env_log := os.environ.get("MARQUEE_LOG_LEVEL"):
        config_data.setdefault("logging", {})["level"] = env_log
    if env_fmt := os.environ.get("MARQUEE_LOG_FORMAT"):
        config_data.setdefault("logging", {})["format"] = env_fmt


def setup_logging(settings: Settings) -> None:
    """Configure logging based on settings. Records go to stderr."""
    log_level = getattr(logging, settings.logging.level.upper(), logging.WARNING)

    if settings.logging.format == "json":
        log_format = '{"time": "%(asctime)s", "level": "%(levelname)s", "module": "%(name)s", "message": "%(message)s"}'
    else:
        log_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    logging.basicConfig(
        level=log_level,
        format=log_format,
        datefmt="%Y-%m-%dT%H:%M:%S",
    )
