"""
Configuration - Environment-driven settings for the labyrinth engine
"""

import logging
import os
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables
load_dotenv()

logger = logging.getLogger(__name__)

PACKAGE_ROOT = Path(__file__).parent


def get_catalogs_dir() -> Path:
    """Get the directory holding room catalogs"""
    configured = os.getenv("LABYRINTH_CATALOG_DIR")
    if configured:
        return Path(configured)
    return PACKAGE_ROOT / "catalogs"


def get_catalog_id() -> str:
    """Get the configured catalog ID"""
    return os.getenv("LABYRINTH_CATALOG", "default")


def get_seed() -> int | None:
    """Get the configured random seed, if any"""
    raw = os.getenv("LABYRINTH_SEED")
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        logger.warning(f"Ignoring non-integer LABYRINTH_SEED: {raw!r}")
        return None


def get_logs_dir() -> Path:
    """Get the directory for session log files"""
    return Path(os.getenv("LABYRINTH_LOGS_DIR", "logs"))
