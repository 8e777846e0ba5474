#!/usr/bin/env python

"""Constants and configuration values for lstheme"""

from pathlib import Path

# Application Information
APP_NAME = "lstheme"
APP_VERSION = "0.1.0"

# File and Directory Constants
DEFAULT_CONFIG_FILE = "config.yaml"
HOME_DIR = Path.home()
CONFIG_DIR = HOME_DIR / ".config" / "lstheme"
CONFIG_FILE_PATH = CONFIG_DIR / DEFAULT_CONFIG_FILE

# Logging
LOGGER_NAME = "lstheme"
LOG_FILE_NAME = "lstheme.log"

# Environment variables
ENV_LS_COLORS = "LS_COLORS"
ENV_EZA_COLORS = "EZA_COLORS"
ENV_EXA_COLORS = "EXA_COLORS"  # older name, read when EZA_COLORS is unset
ENV_NO_COLOR = "NO_COLOR"
ENV_STDIN_SEPARATOR = "EZA_STDIN_SEPARATOR"

# Default Configuration Values
DEFAULT_STDIN_SEPARATOR = "\n"

DEFAULT_CONFIG = {
    "color": None,
    "color_scale": None,
    "log_dir": None,
    "colors": {
        "ls": None,
        "exa": None,
    },
}

# File Size Limits
MAX_CONFIG_FILE_SIZE = 1024 * 1024  # 1MB

# Exit codes
SUCCESS_EXIT_CODE = 0
ERROR_EXIT_CODE = 1
OPTIONS_ERROR_EXIT_CODE = 3
