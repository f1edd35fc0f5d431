"""
Pattern matching for profile section location and entry field extraction.

This module provides regex patterns and alias tables used across the
parsing context to find sections, split them into entries and recover fields.

Pattern classes follow a single convention:
- Dataclasses with frozen=True for immutability
- Class-level constants for patterns
- Helper functions that use these patterns
"""

import re
from dataclasses import dataclass

# =============================================================================
# MARKDOWN HEADER PATTERNS (for section location)
# =============================================================================


@dataclass(frozen=True)
class MarkdownHeaderPatterns:
    """
    Regex patterns for detecting markdown section headers.

    Only one or two hash marks count as a top-level header. Deeper headers
    (### and below) are entry sub-headings inside a section.
    """

    # Top-level header: "# Title" or "## Title"
    TOP_LEVEL_HEADER: re.Pattern = re.compile(r"^#{1,2}\s+(.+?)\s*$")

    # Any header-like text, used to skip headers inside skill/interest lists
    HEADER_LIKE: re.Pattern = re.compile(r"^#")


# =============================================================================
# SECTION ALIASES
# =============================================================================


@dataclass(frozen=True)
class SectionAliases:
    """
    Header labels recognized as naming the same logical section.

    Order matters only for readability; the first matching header in the
    document wins regardless of which alias it used.
    """

    ABOUT: tuple = ("About me", "About", "Summary")
    EXPERIENCE: tuple = ("Work Experience", "Experience")
    EDUCATION: tuple = ("Education",)
    PROJECTS: tuple = ("Projects", "Project")
    VOLUNTEERING: tuple = (
        "Volunteering",
        "Volunteer",
        "Volunteer Experience",
        "Volunteering Experience",
    )
    SKILLS: tuple = ("Skills", "Skill")
    INTERESTS: tuple = (
        "Interests",
        "Interest",
        "Following",
        "Groups",
        "Group",
        "Companies Followed",
        "Company Followed",
    )


# =============================================================================
# ENTRY MARKERS (for entry splitting)
# =============================================================================


@dataclass(frozen=True)
class EntryMarkers:
    """
    Line-start tokens that open a new entry within a section.

    Each marker consumes the bullet and heading/bold token, so the entry
    block starts directly with the entry's text.
    """

    # "- ### Title at Company"
    EXPERIENCE: re.Pattern = re.compile(r"^[ \t]*-[ \t]*###[ \t]+", re.MULTILINE)

    # "- ### Degree at School" or "### Degree at School"
    EDUCATION: re.Pattern = re.compile(r"^[ \t]*(?:-[ \t]*)?###[ \t]+", re.MULTILINE)

    # "- ### Name" or "- **Name**"
    PROJECT: re.Pattern = re.compile(r"^[ \t]*-[ \t]*(?:###|\*\*)[ \t]*", re.MULTILINE)

    # "- ### Role at Organization" or "- **Role** at Organization"
    VOLUNTEER: re.Pattern = re.compile(r"^[ \t]*-[ \t]*(?:###|\*\*)[ \t]*", re.MULTILINE)


# =============================================================================
# ENTRY FIELD PATTERNS
# =============================================================================


@dataclass(frozen=True)
class RolePatterns:
    """
    Patterns for "<role> at <organization>" headings.

    Used by experience and volunteering entries. The linked form is tried
    before the plain form.
    """

    # Engineer at [Acme](https://linkedin.com/company/acme)
    LINKED: re.Pattern = re.compile(r"^(.+?) at \[([^\]]+)\]\(([^)\s]+)\)")

    # Engineer at Acme (rest of the first line)
    PLAIN: re.Pattern = re.compile(r"^(.+?) at ([^\n]+)")


@dataclass(frozen=True)
class EducationPatterns:
    """
    Patterns for the four education tiers, tried in order.
    """

    # Tier 1: B.S. || Computer Science at [MIT](url)
    DEGREE_AT_LINKED_SCHOOL: re.Pattern = re.compile(r"^(.+?)\s+at\s+\[([^\]]+)\]\(([^)]*)\)")

    # Tier 2: B.S., Computer Science at MIT
    # Degree text may not contain "[" so "[University at Buffalo](url)" is left to tier 3
    DEGREE_AT_PLAIN_SCHOOL: re.Pattern = re.compile(r"^([^\[\n]+?)\s+at\s+([^\n\[]+)")

    # Tier 3: [MIT](url) with the degree on a following line
    LINKED_SCHOOL_ONLY: re.Pattern = re.compile(r"^\[([^\]]+)\]\(([^)]*)\)")

    # Tier 4: first line is the school
    PLAIN_SCHOOL_ONLY: re.Pattern = re.compile(r"^([^\n]+)")

    # A lone line naming an institution is a school even without other evidence
    INSTITUTION_KEYWORD: re.Pattern = re.compile(
        r"\b(?:University|College|School|Institute|Academy|Polytechnic|Conservatory)\b",
        re.IGNORECASE,
    )

    # Lines that are list items or numbers, never a degree
    NON_DEGREE_LINE: re.Pattern = re.compile(r"^[-•\d]")


@dataclass(frozen=True)
class DatePatterns:
    """
    Patterns for date ranges inside entry blocks.
    """

    # 2015 - 2019, 2015–2019, 2020 - Present
    YEAR_RANGE: re.Pattern = re.compile(r"(\d{4})\s*[-–]\s*(\d{4}|Present)", re.IGNORECASE)

    # "()" or "[ ]" left behind once a bracketed year range is removed
    EMPTY_BRACKETS: re.Pattern = re.compile(r"\(\s*\)|\[\s*\]")

    # Date: Jan 2020 - Mar 2020 / Duration: 6 months
    DATE_LABEL: re.Pattern = re.compile(r"\b(?:Date|Duration):[ \t]*([^\n]+)", re.IGNORECASE)


@dataclass(frozen=True)
class LabelPatterns:
    """
    Patterns for explicit "Label: value" sub-fields.
    """

    ASSOCIATED_WITH: re.Pattern = re.compile(
        r"\b(?:Associated with|At|For):[ \t]*\[?([^\]\n]+)\]?", re.IGNORECASE
    )

    CAUSE: re.Pattern = re.compile(r"\b(?:Cause|Focus):[ \t]*([^\n]+)", re.IGNORECASE)


@dataclass(frozen=True)
class ListPatterns:
    """
    Patterns for list-shaped sections (skills, interests) and links.
    """

    # "- item", "• item", "* item", "1. item", "2) item"
    BULLET_LINE: re.Pattern = re.compile(r"^(?:[-•][ \t]*|\*[ \t]+|\d+[.)][ \t]+)(.+)$")

    # Lines beginning with a list marker (projects description scan)
    LIST_MARKER: re.Pattern = re.compile(r"^[-*•]")

    # [label](url)
    MARKDOWN_LINK: re.Pattern = re.compile(r"\[([^\]]+)\]\(([^)]+)\)")

    # [label](https://linkedin.com/company/...) or /school/...
    LINKEDIN_ENTITY_LINK: re.Pattern = re.compile(
        r"\[([^\]]+)\]\((https://(?:www\.)?linkedin\.com/(?:company|school)/[^)]+)\)"
    )

    # Leading link label for projects whose name is only a link
    LEADING_LINK_LABEL: re.Pattern = re.compile(r"^\[([^\]]+)\]")

    # Project name: leading text up to a newline or a link
    LEADING_TEXT: re.Pattern = re.compile(r"^([^\n\[]+)")


# =============================================================================
# HELPER FUNCTIONS
# =============================================================================


def normalize_section_name(name: str) -> str:
    """
    Normalize a header label for alias matching.

    Args:
        name: Raw header text from markdown

    Returns:
        Lowercase label with collapsed whitespace and no trailing colon
    """
    normalized = name.lower().strip()
    normalized = re.sub(r"\s+", " ", normalized)
    return normalized.rstrip(":").strip()


def is_header_like(text: str) -> bool:
    """Check whether a list item is actually a markdown header."""
    return bool(MarkdownHeaderPatterns.HEADER_LIKE.match(text))
