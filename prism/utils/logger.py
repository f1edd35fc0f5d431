"""
Session logging for PRISM runs.

One call to setup_logger() per run configures loguru with a DEBUG log file
inside a session directory and an INFO console stream on stderr (stdout is
kept free for CLI output such as JSON). Each context wraps this in its own
contexts/{context}/logger.py with a message prefix.
"""

import os
import platform
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from loguru import logger

from prism import __version__

load_dotenv()

LOGS_PATH = Path(os.getenv("LOGS_PATH", "outs/logs"))

FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {message}"
CONSOLE_FORMAT = (
    "{time:HH:mm:ss} | <level>{level: <7}</level> | <level>{message}</level>"
)

# Console colors per level; levels not listed keep loguru's defaults
LEVEL_COLORS = {
    "DEBUG": "<dim>",
    "WARNING": "<yellow>",
    "ERROR": "<red>",
    "CRITICAL": "<bold><red>",
}


def session_log_dir(run_kind: str, root: Optional[Path] = None) -> Path:
    """
    Build a timestamped directory path for one run (not created here).

    Example:
        >>> session_log_dir("scrape")  # doctest: +SKIP
        PosixPath('outs/logs/scrape_20260101_120000')
    """
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    return Path(root or LOGS_PATH) / f"{run_kind}_{timestamp}"


def setup_logger(
    context_name: str,
    log_dir: Optional[Path] = None,
    extra_provenance: Optional[dict] = None,
    console_level: str = "INFO",
) -> Path:
    """
    Route loguru output for one run to a log file and the console.

    Replaces any previously configured sinks, so calling it again starts a
    fresh session.

    Args:
        context_name: Context identifier, used as the log file stem
            (e.g., "parse", "intake", "enrich")
        log_dir: Session directory (default: LOGS_PATH)
        extra_provenance: Run details to record in the header (e.g., the profile URL)
        console_level: Minimum level echoed to stderr

    Returns:
        Path to the log file
    """
    log_dir = Path(log_dir) if log_dir else LOGS_PATH
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / f"{context_name}.log"

    logger.remove()
    for level_name, color in LEVEL_COLORS.items():
        logger.level(level_name, color=color)

    logger.add(log_file, format=FILE_FORMAT, level="DEBUG", encoding="utf-8")
    logger.add(sys.stderr, format=CONSOLE_FORMAT, level=console_level, colorize=True)

    log_provenance(context_name, extra_provenance)
    return log_file


def log_provenance(context_name: str, extra_context: Optional[dict] = None) -> None:
    """Write a header describing how this run was invoked."""
    header = {
        "Context": context_name,
        "PRISM": __version__,
        "Command": " ".join(sys.argv),
        "Working directory": Path.cwd(),
        "Python": platform.python_version(),
        **(extra_context or {}),
    }

    logger.debug("-" * 72)
    for key, value in header.items():
        logger.debug(f"{key}: {value}")
    logger.debug("-" * 72)
