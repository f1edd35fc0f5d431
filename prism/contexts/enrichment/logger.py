"""
Enrichment context logger.

Provides logging interface for enrichment context with automatic [enrich] prefix.
"""

from loguru import logger

CONTEXT_PREFIX = "[enrich]"


def _log_info(message: str) -> None:
    """Log info message with [enrich] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [enrich] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [enrich] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_llm_usage(task: str, response) -> None:
    """
    Log token usage for one LLM call.

    Args:
        task: What the call was for (e.g., "keywords")
        response: LLMResponse from the provider
    """
    _log_debug(
        f"{task}: {response.model} used {response.input_tokens} input / "
        f"{response.output_tokens} output tokens ({response.total_tokens} total)"
    )
