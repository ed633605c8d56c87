# File: meeting_finder/core/config_manager.py
"""
Centralized configuration management for Meeting Finder.
Loads settings from environment variables (and a local .env file).
"""

import os
import logging
from pathlib import Path
from dotenv import load_dotenv

from meeting_finder.models.interval import DAY_LENGTH

# Load environment variables
load_dotenv()

TRUTHY_VALUES = ['yes', 'true', '1', 'on']


class Config:
    """Application configuration singleton."""

    # Base directories
    BASE_DIR = Path(__file__).parent.parent.parent  # Go up 3 levels from meeting_finder/core/
    LOGS_DIR = Path(os.getenv("MEETING_FINDER_LOGS_DIR", str(BASE_DIR / "logs")))
    ENV_FILE = BASE_DIR / ".env"

    # Logging
    LOG_LEVEL = os.getenv("MEETING_FINDER_LOG_LEVEL", "INFO").strip().upper()
    LOG_TO_FILE = os.getenv("MEETING_FINDER_LOG_TO_FILE", "").strip().lower() in TRUTHY_VALUES

    # The day is fixed at minute granularity; not configurable
    DAY_LENGTH = DAY_LENGTH

    @classmethod
    def log_level(cls) -> int:
        """Resolve LOG_LEVEL to a logging constant, falling back to INFO."""
        level = logging.getLevelName(cls.LOG_LEVEL)
        return level if isinstance(level, int) else logging.INFO

    @classmethod
    def validate(cls) -> bool:
        """Validate that the configuration is usable."""
        errors = []

        if not isinstance(logging.getLevelName(cls.LOG_LEVEL), int):
            errors.append(f"MEETING_FINDER_LOG_LEVEL '{cls.LOG_LEVEL}' is not a logging level")

        if cls.LOG_TO_FILE and cls.LOGS_DIR.exists() and not cls.LOGS_DIR.is_dir():
            errors.append(f"Log directory {cls.LOGS_DIR} exists but is not a directory")

        if errors:
            for error in errors:
                print(f"Configuration Error: {error}")
            return False

        return True
