import os
import sys
from pathlib import Path
from typing import Optional

from loguru import logger


def configure_logger(level: Optional[str] = None, log_file: Optional[str] = None):
    """
    Configure loguru for the lease check service.

    Level and file default to LEASECHECK_LOG_LEVEL and LEASECHECK_LOG_FILE.
    Without a log file only the stderr sink is installed.
    """
    level = (level or os.getenv('LEASECHECK_LOG_LEVEL') or 'INFO').upper()
    log_file = log_file or os.getenv('LEASECHECK_LOG_FILE')

    # Remove default handler to avoid duplicate logs
    logger.remove()

    logger.add(
        sys.stderr,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>",
        level=level
    )

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_path,
            rotation="10 MB",
            retention="10 days",
            level=level,
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}",
            backtrace=True,
            diagnose=False
        )
