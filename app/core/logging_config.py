"""
Description:
Configures the loguru logger once at application startup.

Dependencies:
- loguru: For application logging.

Author: @kcaparas1630
"""
import sys
from loguru import logger

LOG_FORMAT = "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>"


def setup_logging(log_level: str = "INFO"):
    """Replace loguru's default sink with a stderr sink at the configured level."""
    logger.remove()
    logger.add(sys.stderr, level=log_level.upper(), format=LOG_FORMAT, enqueue=False)
    logger.info(f"Logging configured at level {log_level.upper()}")
