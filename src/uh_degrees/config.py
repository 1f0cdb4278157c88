"""Configuration helpers and Settings container.

This module provides a small `Settings` dataclass and `get_settings` which
reads the dataset location, report output directory and logging options
from the environment (or a `.env` file at the project root).
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
import logging
import os

from dotenv import load_dotenv

# Explicitly load .env from project root
PROJECT_ROOT = Path(__file__).resolve().parents[2]
load_dotenv(PROJECT_ROOT / ".env")

@dataclass(frozen=True)
class Settings:
    """Container for configuration read from the environment.

    Attributes:
        data_path: Dataset file (JSON or CSV) read by the CLI.
        output_dir: Directory receiving CSV report tables.
        log_path: Log file written alongside stdout logging.
        log_level: Numeric logging level.
    """
    data_path: Path
    output_dir: Path
    log_path: Path
    log_level: int


def get_settings() -> Settings:
    """Read environment variables and return a frozen `Settings` object.

    Raises:
        RuntimeError: if `UH_LOG_LEVEL` is not a known logging level name.
    """
    data_path = Path(os.getenv("UH_DATA_PATH", "data/uh_degrees.json"))
    output_dir = Path(os.getenv("UH_OUTPUT_DIR", "data/tables"))
    log_path = Path(os.getenv("UH_LOG_PATH", "logs/uh_degrees.log"))
    level_name = os.getenv("UH_LOG_LEVEL", "INFO").strip().upper()

    log_level = logging.getLevelName(level_name)
    if not isinstance(log_level, int):
        raise RuntimeError(
            f"UH_LOG_LEVEL={level_name!r} is not a logging level "
            "(expected DEBUG, INFO, WARNING, ERROR or CRITICAL)."
        )

    return Settings(
        data_path=data_path,
        output_dir=output_dir,
        log_path=log_path,
        log_level=log_level,
    )
