"""
Constants for the teleproj application.
"""
from pathlib import Path
import os

# Application information
APP_NAME = "teleproj"
APP_DESCRIPTION = "Jump between saved project directories by index or name"

# Paths
CONFIG_FILE = Path(os.path.expanduser("~/.teleproj.toml"))
CONFIG_ENV_VAR = "TELEPROJ_CONFIG"
LOG_DIR = Path(os.path.expanduser("~/.config/teleproj/logs"))

# Shell integration
SHELL_INVOKE_COMMAND = "teleproj"
SHELL_FUNCTION_NAME = "tp"

# Logging
LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level} | {message}"
LOG_ROTATION = "1 MB"
LOG_RETENTION = "10 days"

# Name used when a path has no final component (e.g. "/")
UNKNOWN_PROJECT_NAME = "unknown"

# Match scoring, one band per tier so a higher tier always wins
EXACT_MATCH_SCORE = 1000
PREFIX_BASE_SCORE = 500
PREFIX_PER_CHAR = 10
PREFIX_MAX_SCORE = EXACT_MATCH_SCORE - 1
CONTAINS_BASE_SCORE = 100
CONTAINS_PER_CHAR = 5
CONTAINS_MAX_SCORE = PREFIX_BASE_SCORE - 1
FUZZY_MAX_SCORE = CONTAINS_BASE_SCORE - 1

# Maximum number of candidates shown for an ambiguous query
MAX_CANDIDATES = 5
