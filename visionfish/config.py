"""
Runtime settings loaded from the environment (and a local .env file).

Grading and quality thresholds are not read from here; they live in
visionfish.thresholds and are passed explicitly.
"""

import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv


LOG_FORMAT = '%(asctime)s [%(levelname)s] %(message)s'


@dataclass(frozen=True)
class Settings:
    log_level: str = "INFO"


def load_settings(env_file: Optional[str] = None) -> Settings:
    """
    Build Settings from the VISIONFISH_LOG_LEVEL environment variable.

    Variables already set in the environment win over values in the .env file.
    """
    load_dotenv(env_file)
    return Settings(
        log_level=os.environ.get("VISIONFISH_LOG_LEVEL", "INFO").strip().upper() or "INFO",
    )


def configure_logging(settings: Optional[Settings] = None) -> None:
    """Set up root logging with the configured level."""
    settings = settings or load_settings()
    level = getattr(logging, settings.log_level, logging.INFO)
    logging.basicConfig(level=level, format=LOG_FORMAT)
