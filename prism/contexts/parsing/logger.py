"""
Parsing context logger.

Provides logging interface for parsing context with automatic [parse] prefix.
All parsing modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

from prism.utils.logger import setup_logger as _setup_logger
from prism.utils.text_processing import truncate

CONTEXT_PREFIX = "[parse]"


def setup_parsing_logger(log_dir: Path, source: str = "markdown") -> Path:
    """
    Setup logger for parsing context.

    Args:
        log_dir: Directory for this parsing session
        source: Where the markdown came from (file path or URL), for provenance

    Returns:
        Path to log file
    """
    return _setup_logger(
        context_name="parse",
        log_dir=log_dir,
        extra_provenance={"Source": source},
    )


# Wrapper functions with automatic [parse] prefix


def _log_info(message: str) -> None:
    """Log info message with [parse] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [parse] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level parsing-specific logging helpers


def log_section_absent(section: str) -> None:
    """Log that a section header was not found."""
    _log_debug(f"No {section} section found")


def log_dropped_entry(section: str, block: str, reason: str) -> None:
    """Log an entry block that no matcher could parse."""
    _log_debug(f"Dropped {section} entry ({reason}): '{truncate(block)}'")


def log_parse_summary(record) -> None:
    """
    Log entry counts for a parsed profile.

    Args:
        record: ProfileRecord returned by parse_profile()
    """
    _log_info(f"Parsed profile: {record.name or '(unnamed)'}")
    _log_debug(f"  - Experience entries: {len(record.experience)}")
    _log_debug(f"  - Education entries: {len(record.education)}")
    _log_debug(f"  - Projects: {len(record.projects)}")
    _log_debug(f"  - Volunteering entries: {len(record.volunteering)}")
    _log_debug(f"  - Skills: {len(record.skills)}")
    _log_debug(f"  - Interests: {len(record.interests)}")
