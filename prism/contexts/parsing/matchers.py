"""
Matcher chain primitives shared by the entry field extractors.

A matcher is a pure function taking an entry block and returning a
structured capture, or None when its format does not apply. Extractors hold
an ordered tuple of matchers and keep the first capture that is not None.
"""

from dataclasses import dataclass
from typing import Callable, Iterable, Optional, TypeVar

from prism.contexts.parsing.section_patterns import DatePatterns, RolePatterns
from prism.utils.text_processing import strip_bold

T = TypeVar("T")

Matcher = Callable[[str], Optional[T]]


def first_match(matchers: Iterable[Matcher], block: str) -> Optional[T]:
    """
    Try matchers in order and return the first non-None capture.

    Later matchers are never called once one succeeds.

    Args:
        matchers: Ordered matcher functions, most specific first
        block: Entry block text

    Returns:
        Capture from the winning matcher, or None if none applied
    """
    for matcher in matchers:
        capture = matcher(block)
        if capture is not None:
            return capture
    return None


def clean_field(value: Optional[str]) -> Optional[str]:
    """Strip bold markers and whitespace; empty results become None."""
    if value is None:
        return None
    value = strip_bold(value).strip()
    return value or None


# =============================================================================
# "<ROLE> AT <ORGANIZATION>" MATCHERS
# =============================================================================


@dataclass(frozen=True)
class RoleCapture:
    """Role and organization recovered from an entry heading."""

    role: str
    organization: str
    url: Optional[str] = None


def match_linked_role(block: str) -> Optional[RoleCapture]:
    """Match "<role> at [<organization>](<url>)"."""
    match = RolePatterns.LINKED.match(block)
    if not match:
        return None
    role, organization = clean_field(match.group(1)), clean_field(match.group(2))
    if not role or not organization:
        return None
    return RoleCapture(role=role, organization=organization, url=match.group(3).strip())


def match_plain_role(block: str) -> Optional[RoleCapture]:
    """Match "<role> at <organization>" where organization is the rest of the line."""
    match = RolePatterns.PLAIN.match(block)
    if not match:
        return None
    role, organization = clean_field(match.group(1)), clean_field(match.group(2))
    if not role or not organization:
        return None
    return RoleCapture(role=role, organization=organization)


ROLE_MATCHERS = (match_linked_role, match_plain_role)


# =============================================================================
# DATES
# =============================================================================


def extract_year_range(block: str) -> Optional[str]:
    """
    Find the first year range in a block, as written.

    Accepts a hyphen or en-dash and "Present" as the end (any case).

    Example:
        >>> extract_year_range("B.S. at MIT 2015 – 2019")
        '2015 – 2019'
    """
    match = DatePatterns.YEAR_RANGE.search(block)
    return match.group(0) if match else None


def extract_date_label(block: str) -> Optional[str]:
    """Return the value of a "Date:" or "Duration:" label."""
    match = DatePatterns.DATE_LABEL.search(block)
    return clean_field(match.group(1)) if match else None


def extract_date_range(block: str, allow_label: bool = True) -> Optional[str]:
    """
    Recover a date range from an entry block.

    Args:
        block: Entry block text
        allow_label: Fall back to an explicit "Date:"/"Duration:" label

    Returns:
        Date range string, or None
    """
    year_range = extract_year_range(block)
    if year_range or not allow_label:
        return year_range
    return extract_date_label(block)
