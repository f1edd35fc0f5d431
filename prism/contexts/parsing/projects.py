"""
Project extraction.
"""

from typing import List, Optional

from prism.contexts.parsing.entry_splitter import split_entries
from prism.contexts.parsing.logger import log_dropped_entry, log_section_absent
from prism.contexts.parsing.matchers import clean_field, extract_date_range
from prism.contexts.parsing.profile_data_structure import ProjectEntry
from prism.contexts.parsing.section_locator import locate_section
from prism.contexts.parsing.section_patterns import (
    EntryMarkers,
    LabelPatterns,
    ListPatterns,
    SectionAliases,
)
from prism.utils.text_processing import non_empty_lines


def extract_project_name(block: str) -> Optional[str]:
    """
    Recover the project name from the start of a block.

    Leading text up to the first newline or link wins; a block that opens
    with a link uses the link label instead. Bold markers are removed.
    """
    match = ListPatterns.LEADING_TEXT.match(block)
    name = clean_field(match.group(1)) if match else None
    if name:
        return name

    match = ListPatterns.LEADING_LINK_LABEL.match(block)
    return clean_field(match.group(1)) if match else None


def extract_project_description(block: str) -> Optional[str]:
    """Return the first line after the name that is not a list item."""
    for line in non_empty_lines(block)[1:]:
        if len(line) >= 2 and not ListPatterns.LIST_MARKER.match(line):
            return clean_field(line)
    return None


def extract_associated_with(block: str) -> Optional[str]:
    """Return the value of an "Associated with:", "At:" or "For:" label."""
    match = LabelPatterns.ASSOCIATED_WITH.search(block)
    return clean_field(match.group(1)) if match else None


def parse_project_entry(block: str) -> Optional[ProjectEntry]:
    """
    Parse one project entry block.

    Args:
        block: Entry text following the "- ### " or "- **" marker

    Returns:
        ProjectEntry, or None if no name is recoverable
    """
    name = extract_project_name(block)
    if not name:
        return None

    return ProjectEntry(
        name=name,
        description=extract_project_description(block),
        date_range=extract_date_range(block),
        associated_with=extract_associated_with(block),
    )


def parse_projects(document: str) -> List[ProjectEntry]:
    """
    Extract project entries from a profile.

    Args:
        document: Full profile markdown

    Returns:
        ProjectEntry list in document order
    """
    body = locate_section(document, SectionAliases.PROJECTS)
    if body is None:
        log_section_absent("projects")
        return []

    projects = []
    for block in split_entries(body, EntryMarkers.PROJECT):
        entry = parse_project_entry(block)
        if entry is None:
            log_dropped_entry("project", block, "no name")
            continue
        projects.append(entry)

    return projects
