"""
Volunteering extraction.

Uses the same linked-then-plain "<role> at <organization>" chain as work
experience, but keeps the organization URL and the optional sub-fields.
"""

from typing import List, Optional

from prism.contexts.parsing.entry_splitter import split_entries
from prism.contexts.parsing.logger import log_dropped_entry, log_section_absent
from prism.contexts.parsing.matchers import (
    ROLE_MATCHERS,
    clean_field,
    extract_date_range,
    first_match,
)
from prism.contexts.parsing.profile_data_structure import VolunteerEntry
from prism.contexts.parsing.section_locator import locate_section
from prism.contexts.parsing.section_patterns import EntryMarkers, LabelPatterns, SectionAliases


def extract_cause(block: str) -> Optional[str]:
    """Return the value of a "Cause:" or "Focus:" label."""
    match = LabelPatterns.CAUSE.search(block)
    return clean_field(match.group(1)) if match else None


def parse_volunteer_entry(block: str) -> Optional[VolunteerEntry]:
    """
    Parse one volunteering entry block.

    Args:
        block: Entry text following the "- ### " or "- **" marker

    Returns:
        VolunteerEntry, or None if role or organization is missing
    """
    capture = first_match(ROLE_MATCHERS, block)
    if capture is None:
        return None

    return VolunteerEntry(
        role=capture.role,
        organization=capture.organization,
        cause=extract_cause(block),
        date_range=extract_date_range(block),
        organization_url=capture.url,
    )


def parse_volunteering(document: str) -> List[VolunteerEntry]:
    """
    Extract volunteering entries from a profile.

    Args:
        document: Full profile markdown

    Returns:
        VolunteerEntry list in document order
    """
    body = locate_section(document, SectionAliases.VOLUNTEERING)
    if body is None:
        log_section_absent("volunteering")
        return []

    volunteering = []
    for block in split_entries(body, EntryMarkers.VOLUNTEER):
        entry = parse_volunteer_entry(block)
        if entry is None:
            log_dropped_entry("volunteering", block, "missing role or organization")
            continue
        volunteering.append(entry)

    return volunteering
