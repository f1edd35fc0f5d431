"""
Education extraction.

Education entries come in the widest variety of layouts, so each block is
tried against four formats in a fixed order, most specific first:

1. "<degree-and-field> at [<school>](<url>)"
2. "<degree-and-field> at <school>"
3. "[<school>](<url>)" with the degree on a following line
4. "<school>" alone on the first line

The date range is recovered from the whole block independently of the tier.
"""

from dataclasses import dataclass
from typing import List, Optional, Tuple

from prism.contexts.parsing.entry_splitter import split_entries
from prism.contexts.parsing.logger import log_dropped_entry, log_section_absent
from prism.contexts.parsing.matchers import clean_field, extract_year_range, first_match
from prism.contexts.parsing.profile_data_structure import EducationEntry
from prism.contexts.parsing.section_locator import locate_section
from prism.contexts.parsing.section_patterns import (
    DatePatterns,
    EducationPatterns,
    EntryMarkers,
    SectionAliases,
)
from prism.utils.text_processing import non_empty_lines

DEGREE_FIELD_SEPARATORS = ("||", ",")


@dataclass(frozen=True)
class SchoolCapture:
    """School and degree details recovered by one education tier."""

    school: str
    degree: Optional[str] = None
    field_of_study: Optional[str] = None
    school_url: Optional[str] = None


def split_degree_and_field(text: str) -> Tuple[Optional[str], Optional[str]]:
    """
    Split "<degree> || <field>" or "<degree>, <field>" into its parts.

    "||" takes precedence over ",". Any further parts are joined back into
    the field with ", ". Without a separator the whole text is the degree.

    Args:
        text: Degree-and-field text from an entry heading

    Returns:
        (degree, field_of_study), either of which may be None

    Example:
        >>> split_degree_and_field("B.S. || Computer Science")
        ('B.S.', 'Computer Science')
        >>> split_degree_and_field("Master of Science, Physics, Math")
        ('Master of Science', 'Physics, Math')
    """
    for separator in DEGREE_FIELD_SEPARATORS:
        if separator in text:
            parts = [clean_field(part) for part in text.split(separator)]
            fields = [part for part in parts[1:] if part]
            return parts[0], ", ".join(fields) or None
    return clean_field(text), None


def _strip_year_range(text: str) -> str:
    """Remove a year range trailing a plain school name, with any brackets left empty."""
    text = DatePatterns.YEAR_RANGE.sub("", text)
    text = DatePatterns.EMPTY_BRACKETS.sub("", text)
    return text.strip().rstrip(",|·-–").strip()


# =============================================================================
# TIER MATCHERS
# =============================================================================


def match_degree_at_linked_school(block: str) -> Optional[SchoolCapture]:
    """Tier 1: "<degree-and-field> at [<school>](<url>)"."""
    match = EducationPatterns.DEGREE_AT_LINKED_SCHOOL.match(block)
    if not match:
        return None
    school = clean_field(match.group(2))
    if not school:
        return None
    degree, field_of_study = split_degree_and_field(match.group(1))
    return SchoolCapture(
        school=school,
        degree=degree,
        field_of_study=field_of_study,
        school_url=match.group(3).strip() or None,
    )


def match_degree_at_plain_school(block: str) -> Optional[SchoolCapture]:
    """Tier 2: "<degree-and-field> at <school>" with no link."""
    match = EducationPatterns.DEGREE_AT_PLAIN_SCHOOL.match(block)
    if not match:
        return None
    school = clean_field(_strip_year_range(match.group(2)))
    if not school:
        return None
    degree, field_of_study = split_degree_and_field(match.group(1))
    return SchoolCapture(school=school, degree=degree, field_of_study=field_of_study)


def match_linked_school_only(block: str) -> Optional[SchoolCapture]:
    """
    Tier 3: "[<school>](<url>)" followed by a descriptive line.

    The first following line that is not a list item or a number (dates
    start with a digit) is taken to be the degree line.
    """
    match = EducationPatterns.LINKED_SCHOOL_ONLY.match(block)
    if not match:
        return None
    school = clean_field(match.group(1))
    if not school:
        return None

    degree, field_of_study = None, None
    for line in non_empty_lines(block[match.end() :]):
        if len(line) > 2 and not EducationPatterns.NON_DEGREE_LINE.match(line):
            degree, field_of_study = split_degree_and_field(line)
            break

    return SchoolCapture(
        school=school,
        degree=degree,
        field_of_study=field_of_study,
        school_url=match.group(2).strip() or None,
    )


def match_plain_school_only(block: str) -> Optional[SchoolCapture]:
    """
    Tier 4: the first line is the school name.

    A lone heading with no following line, no year range and no
    institution word (University, College, ...) is a malformed entry, not a
    school.
    """
    match = EducationPatterns.PLAIN_SCHOOL_ONLY.match(block)
    if not match:
        return None
    if (
        len(non_empty_lines(block)) < 2
        and not DatePatterns.YEAR_RANGE.search(block)
        and not EducationPatterns.INSTITUTION_KEYWORD.search(match.group(1))
    ):
        return None
    school = clean_field(_strip_year_range(match.group(1)))
    return SchoolCapture(school=school) if school else None


EDUCATION_TIERS = (
    match_degree_at_linked_school,
    match_degree_at_plain_school,
    match_linked_school_only,
    match_plain_school_only,
)


# =============================================================================
# EXTRACTION
# =============================================================================


def parse_education_entry(block: str) -> Optional[EducationEntry]:
    """
    Parse one education entry block.

    Args:
        block: Entry text following the "### " marker

    Returns:
        EducationEntry, or None if no tier recovers a school
    """
    capture = first_match(EDUCATION_TIERS, block)
    if capture is None:
        return None

    return EducationEntry(
        school=capture.school,
        degree=capture.degree,
        field_of_study=capture.field_of_study,
        date_range=extract_year_range(block),
        school_url=capture.school_url,
    )


def parse_education(document: str) -> List[EducationEntry]:
    """
    Extract education entries from a profile.

    Args:
        document: Full profile markdown

    Returns:
        EducationEntry list in document order
    """
    body = locate_section(document, SectionAliases.EDUCATION)
    if body is None:
        log_section_absent("education")
        return []

    education = []
    for block in split_entries(body, EntryMarkers.EDUCATION):
        entry = parse_education_entry(block)
        if entry is None:
            log_dropped_entry("education", block, "no school recoverable")
            continue
        education.append(entry)

    return education
