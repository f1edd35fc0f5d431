"""
Profile assembly for the Parsing context.

Runs every section parser over one markdown document and assembles the
results into a ProfileRecord. This module never raises for malformed or
missing sections: absent sections become empty lists or empty strings.

Pattern: parsers produce plain values, the data structure holds them.
"""

from pathlib import Path
from typing import Optional

from prism.contexts.parsing.education import parse_education
from prism.contexts.parsing.experience import parse_experience
from prism.contexts.parsing.listings import parse_interests, parse_skills
from prism.contexts.parsing.logger import log_parse_summary
from prism.contexts.parsing.normalizer import (
    normalize_line_endings,
    preprocess_profile_markdown,
)
from prism.contexts.parsing.profile_data_structure import ProfileRecord
from prism.contexts.parsing.projects import parse_projects
from prism.contexts.parsing.section_locator import locate_section_span
from prism.contexts.parsing.section_patterns import SectionAliases
from prism.contexts.parsing.volunteering import parse_volunteering
from prism.utils.text_processing import non_empty_lines


def extract_headline(text: str, name: str) -> str:
    """
    Pick the headline with a positional heuristic.

    If the document has at least two non-empty lines and the first one
    contains the name, the headline is the second line; otherwise it is the
    first line.

    Args:
        text: Profile markdown
        name: Display name from upstream metadata

    Returns:
        Headline text, or "" for a blank document
    """
    lines = non_empty_lines(text)
    if not lines:
        return ""
    if len(lines) > 1 and name in lines[0]:
        return lines[1]
    return lines[0]


def extract_about(text: str, original: Optional[str] = None) -> str:
    """
    Return the trimmed About/Summary section body, or "".

    The section is located in text. When original is given (the same
    document before invisible characters were cleaned, with identical line
    breaks) the body is cut from it instead, so the author's characters
    survive verbatim.
    """
    lines = text.split("\n")
    span = locate_section_span(lines, SectionAliases.ABOUT)
    if span is None:
        return ""
    if original is not None:
        lines = original.split("\n")
    start, end = span
    return "\n".join(lines[start:end]).strip()


def parse_profile(
    raw_markdown: str,
    author_name: str,
    image_url: Optional[str] = None,
    source_url: str = "",
) -> ProfileRecord:
    """
    Parse profile markdown into a structured record.

    This is the main parsing function. Each section is located and parsed
    independently; none depends on another's result.

    Args:
        raw_markdown: Full profile markdown from the upstream provider
        author_name: Display name supplied as upstream metadata
        image_url: Optional profile image URL from upstream metadata
        source_url: Profile URL the markdown was fetched from

    Returns:
        ProfileRecord with every field populated or defaulted

    Example:
        >>> record = parse_profile("## Skills\\n- Python\\n- Python\\n", "Ada")
        >>> record.skills
        ['Python']
    """
    raw_markdown = raw_markdown or ""
    name = author_name or ""
    # Headline and about keep the raw characters; only line endings change
    verbatim = normalize_line_endings(raw_markdown)
    text = preprocess_profile_markdown(raw_markdown)

    record = ProfileRecord(
        name=name,
        headline=extract_headline(verbatim, name),
        about=extract_about(text, original=verbatim),
        experience=parse_experience(text),
        education=parse_education(text),
        projects=parse_projects(text),
        volunteering=parse_volunteering(text),
        skills=parse_skills(text),
        interests=parse_interests(text),
        url=source_url or "",
        image=image_url or None,
        raw_text=raw_markdown,
    )

    log_parse_summary(record)
    return record


def parse_profile_file(
    file_path: Path,
    author_name: str = "",
    image_url: Optional[str] = None,
    source_url: str = "",
) -> ProfileRecord:
    """
    Parse profile markdown from a file.

    Args:
        file_path: Path to markdown file
        author_name: Display name (no metadata travels with a local file)
        image_url: Optional profile image URL
        source_url: Optional profile URL

    Returns:
        ProfileRecord
    """
    text = Path(file_path).read_text(encoding="utf-8")
    return parse_profile(text, author_name, image_url=image_url, source_url=source_url)
