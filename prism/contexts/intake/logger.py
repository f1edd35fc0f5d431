"""
Intake context logger.

Provides logging interface for intake context with automatic [intake] prefix.
All intake modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path
from typing import Optional

from loguru import logger

from prism.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[intake]"


def setup_intake_logger(log_dir: Optional[Path], profile_url: str) -> Path:
    """
    Setup logger for intake context.

    Args:
        log_dir: Directory for this scrape session (default: LOGS_PATH)
        profile_url: Profile being scraped, for provenance

    Returns:
        Path to log file
    """
    return _setup_logger(
        context_name="intake",
        log_dir=log_dir,
        extra_provenance={"Profile": profile_url},
    )


# Wrapper functions with automatic [intake] prefix


def _log_info(message: str) -> None:
    """Log info message with [intake] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [intake] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [intake] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [intake] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [intake] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")
