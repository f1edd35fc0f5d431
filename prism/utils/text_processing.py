"""
Text processing utilities shared across contexts.
"""

import re
from typing import Iterable, List

BOLD_MARKER = "**"

HORIZONTAL_RULE = re.compile(r"^[-*_]{3,}$")


def dedupe(items: Iterable[str]) -> List[str]:
    """
    Remove exact duplicates while preserving first-seen order.

    Comparison is exact (case-sensitive, no trimming).

    Args:
        items: Strings in candidate order

    Returns:
        New list holding each distinct string once, at its first position

    Example:
        >>> dedupe(["Python", "React", "Python", "python"])
        ['Python', 'React', 'python']
    """
    return list(dict.fromkeys(items))


def strip_bold(text: str) -> str:
    """Remove markdown bold markers (**) from text."""
    return text.replace(BOLD_MARKER, "")


def non_empty_lines(text: str) -> List[str]:
    """
    Split text into stripped lines, dropping blank ones.

    Args:
        text: Multi-line text

    Returns:
        List of stripped, non-empty lines
    """
    return [line.strip() for line in text.split("\n") if line.strip()]


def is_horizontal_rule(line: str) -> bool:
    """Check if a stripped line is a markdown thematic break (---, ***, ___)."""
    return bool(HORIZONTAL_RULE.match(line))


def truncate(text: str, limit: int = 80) -> str:
    """Shorten text for log messages."""
    text = text.replace("\n", " ")
    return text if len(text) <= limit else f"{text[:limit]}..."
