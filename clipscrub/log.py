"""Logging setup for the clipscrub package."""

import logging
import os
from typing import Optional

LOG_LEVEL_ENV = "CLIPSCRUB_LOG_LEVEL"

logger = logging.getLogger("clipscrub")


def setup_logging(level: Optional[str] = None) -> None:
    """Configure root logging from an explicit level or the environment."""

    level_name = (level or os.getenv(LOG_LEVEL_ENV, "WARNING")).upper()
    resolved = getattr(logging, level_name, logging.WARNING)

    logging.basicConfig(
        level=resolved,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )
