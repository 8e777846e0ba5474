#!/usr/bin/env python

import copy
import os
import sys
import yaml
from typing import Dict, Any, Mapping, Optional
from pathlib import Path
from rich.console import Console
from rich.markup import escape

from .constants import (
    CONFIG_FILE_PATH, DEFAULT_CONFIG, ENV_EXA_COLORS, ENV_EZA_COLORS,
    ENV_LS_COLORS, ERROR_EXIT_CODE, MAX_CONFIG_FILE_SIZE,
)
from .logger import logger


def load_config(config_path: Path = CONFIG_FILE_PATH, console: Optional[Console] = None) -> Dict[str, Any]:
    """Load and validate configuration from YAML file.

    A missing file is not an error: every setting has a default and the
    environment can still supply the colour strings.
    """
    console = console or Console(stderr=True)

    if not config_path.exists():
        logger.debug(f"No config file at {config_path}, using defaults")
        return copy.deepcopy(DEFAULT_CONFIG)

    # Check if file is readable
    if not config_path.is_file() or not os.access(config_path, os.R_OK):
        console.print(f"[red]Error: Config file '{config_path}' is not readable![/red]")
        sys.exit(ERROR_EXIT_CODE)

    # Check file size (prevent loading massive files)
    try:
        file_size = config_path.stat().st_size
        if file_size > MAX_CONFIG_FILE_SIZE:
            console.print(f"[red]Error: Config file '{config_path}' is too large (>1MB)![/red]")
            sys.exit(ERROR_EXIT_CODE)
    except OSError as e:
        console.print(f"[red]Error accessing config file '{config_path}': {escape(str(e))}[/red]")
        sys.exit(ERROR_EXIT_CODE)

    try:
        with open(config_path, 'r') as file:
            config = yaml.safe_load(file)
    except yaml.YAMLError as e:
        console.print(f"[red]Error: Invalid YAML in config file: {escape(str(e))}[/red]")
        sys.exit(ERROR_EXIT_CODE)

    if config is None:
        config = {}
    if not isinstance(config, dict):
        console.print(f"[red]Error: Config file '{config_path}' must contain a mapping[/red]")
        sys.exit(ERROR_EXIT_CODE)

    logger.debug(f"Loaded config from {config_path}")
    return _validate_and_normalize_config(config)


def _optional_str(value: Any, field_name: str) -> Optional[str]:
    """Keep strings, turn anything else into None with a warning"""
    if value is None or isinstance(value, str):
        return value
    logger.warning(f"Ignoring config field {field_name}: expected a string, got {type(value).__name__}")
    return None


def _validate_and_normalize_config(config: Dict[str, Any]) -> Dict[str, Any]:
    """Validate and normalize configuration, falling back to defaults per key"""
    normalized = copy.deepcopy(DEFAULT_CONFIG)

    for key in ("color", "color_scale", "log_dir"):
        if key in config:
            normalized[key] = _optional_str(config[key], key)

    colors = config.get("colors", {})
    if colors is None:
        colors = {}
    if not isinstance(colors, dict):
        logger.warning("Ignoring config field colors: expected a mapping")
        colors = {}

    for key in ("ls", "exa"):
        if key in colors:
            normalized["colors"][key] = _optional_str(colors[key], f"colors.{key}")

    return normalized


def colour_environment(config: Dict[str, Any], env: Mapping[str, str]) -> Dict[str, str]:
    """Environment with the config's colour strings filled in where unset.

    Variables that are set always win over the config file.
    """
    merged = dict(env)
    colors = config.get("colors", {})

    if ENV_LS_COLORS not in merged and colors.get("ls") is not None:
        merged[ENV_LS_COLORS] = colors["ls"]

    if (ENV_EZA_COLORS not in merged and ENV_EXA_COLORS not in merged
            and colors.get("exa") is not None):
        merged[ENV_EZA_COLORS] = colors["exa"]

    return merged
