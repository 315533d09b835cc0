"""
Process-wide logging setup.
"""

from __future__ import annotations

import logging

from . import settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str | None = None) -> None:
    # basicConfig is a no-op once the root logger has handlers.
    logging.basicConfig(level=level or settings.log_level(), format=LOG_FORMAT)
