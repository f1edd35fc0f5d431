"""
Work experience extraction.

Experience entries are plain "<title> at <company>" summaries; the company
URL of a linked heading is not retained.
"""

from typing import List

from prism.contexts.parsing.entry_splitter import split_entries
from prism.contexts.parsing.logger import log_dropped_entry, log_section_absent
from prism.contexts.parsing.matchers import ROLE_MATCHERS, first_match
from prism.contexts.parsing.section_locator import locate_section
from prism.contexts.parsing.section_patterns import EntryMarkers, SectionAliases


def parse_experience_entry(block: str) -> str | None:
    """
    Parse one experience entry block.

    Args:
        block: Entry text following the "- ### " marker

    Returns:
        "<title> at <company>", or None if the heading has no "at" separator
    """
    capture = first_match(ROLE_MATCHERS, block)
    if capture is None:
        return None
    return f"{capture.role} at {capture.organization}"


def parse_experience(document: str) -> List[str]:
    """
    Extract work experience summaries from a profile.

    Args:
        document: Full profile markdown

    Returns:
        "Title at Company" strings in document order (duplicates kept)
    """
    body = locate_section(document, SectionAliases.EXPERIENCE)
    if body is None:
        log_section_absent("experience")
        return []

    experiences = []
    for block in split_entries(body, EntryMarkers.EXPERIENCE):
        summary = parse_experience_entry(block)
        if summary is None:
            log_dropped_entry("experience", block, "no '<title> at <company>' heading")
            continue
        experiences.append(summary)

    return experiences
