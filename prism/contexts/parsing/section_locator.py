"""
Section location for profile markdown.

Finds the body of a titled section (e.g. "## Experience") so entry parsers
only ever see the text that belongs to their section.
"""

from typing import Iterable, Optional

from prism.contexts.parsing.section_patterns import (
    MarkdownHeaderPatterns,
    normalize_section_name,
)


def is_top_level_header(line: str) -> bool:
    """Check if a line is a section boundary (# or ## header)."""
    return bool(MarkdownHeaderPatterns.TOP_LEVEL_HEADER.match(line.strip()))


def header_label(line: str) -> Optional[str]:
    """
    Extract the label of a top-level header line.

    Args:
        line: A single markdown line

    Returns:
        Header text (e.g. "Work Experience"), or None if the line is not a header
    """
    match = MarkdownHeaderPatterns.TOP_LEVEL_HEADER.match(line.strip())
    return match.group(1) if match else None


def locate_section_span(lines: list[str], aliases: Iterable[str]) -> Optional[tuple[int, int]]:
    """
    Find the line span of the first section whose header matches an alias.

    Args:
        lines: Document lines
        aliases: Header labels naming the section

    Returns:
        (start, end) indices of the body lines, end exclusive, or None if no
        header matches
    """
    wanted = {normalize_section_name(alias) for alias in aliases}

    for index, line in enumerate(lines):
        label = header_label(line)
        if label is None or normalize_section_name(label) not in wanted:
            continue

        end = index + 1
        while end < len(lines) and not is_top_level_header(lines[end]):
            end += 1
        return index + 1, end

    return None


def locate_section(document: str, aliases: Iterable[str]) -> Optional[str]:
    """
    Return the body of the first section whose header matches an alias.

    Header labels are compared case-insensitively against every alias. The
    body runs from the line after the header up to (not including) the next
    top-level header, or to the end of the document.

    Args:
        document: Full profile markdown
        aliases: Header labels naming the section (e.g. ("Work Experience", "Experience"))

    Returns:
        Section body text, or None if no header matches. An empty string means
        the header exists but the section has no content.

    Example:
        >>> locate_section("## Skills\\n- Python\\n## About\\nHi", ("Skills",))
        '- Python'
    """
    lines = document.split("\n")
    span = locate_section_span(lines, aliases)
    if span is None:
        return None
    start, end = span
    return "\n".join(lines[start:end])
