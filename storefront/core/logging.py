"""Logging configuration for the application"""

import logging
from typing import Optional

from .config import get_settings

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(level: Optional[str] = None) -> None:
    """Configure console logging once for the whole process"""
    settings = get_settings()
    log_level = (level or settings.LOG_LEVEL).upper()

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # Avoid stacking handlers when the app is created more than once
    if not any(getattr(h, "_storefront", False) for h in root_logger.handlers):
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        console_handler._storefront = True
        root_logger.addHandler(console_handler)

    # Quiet noisy libraries
    logging.getLogger("sqlalchemy.engine").setLevel(
        logging.INFO if settings.DATABASE_ECHO else logging.WARNING
    )
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
