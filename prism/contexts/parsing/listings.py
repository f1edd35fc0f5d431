"""
Holistic extraction for list-shaped sections (skills, interests).

These sections are not split into entries. Items are collected from the
whole section body and deduplicated in first-seen order.
"""

import re
from typing import List, Tuple

from prism.contexts.parsing.logger import log_section_absent
from prism.contexts.parsing.matchers import clean_field
from prism.contexts.parsing.section_locator import locate_section
from prism.contexts.parsing.section_patterns import ListPatterns, SectionAliases, is_header_like
from prism.utils.text_processing import dedupe, is_horizontal_rule, non_empty_lines

FALLBACK_SEPARATORS = re.compile(r"[,\n]")


def collect_bullet_items(body: str, stop_at_link: bool = False) -> List[str]:
    """
    Collect the text of every bulleted or numbered line.

    Args:
        body: Section body
        stop_at_link: Cut each item at its first "[" (link labels are
            collected separately for interests)

    Returns:
        Item texts with bold markers removed; header lines and empty items skipped
    """
    items = []
    for line in non_empty_lines(body):
        if is_horizontal_rule(line):
            continue
        match = ListPatterns.BULLET_LINE.match(line)
        if not match:
            continue

        text = match.group(1)
        if stop_at_link:
            text = text.split("[", 1)[0]
        text = clean_field(text)
        if text and not is_header_like(text):
            items.append(text)

    return items


def collect_link_labels(body: str) -> List[str]:
    """Collect the label of every markdown link, in order."""
    labels = (clean_field(match.group(1)) for match in ListPatterns.MARKDOWN_LINK.finditer(body))
    return [label for label in labels if label]


def split_delimited_items(body: str) -> List[str]:
    """Split a body on commas and newlines, dropping empty and header fragments."""
    fragments = (clean_field(fragment) for fragment in FALLBACK_SEPARATORS.split(body))
    return [
        fragment
        for fragment in fragments
        if fragment and not is_header_like(fragment) and not is_horizontal_rule(fragment)
    ]


def parse_skills(document: str) -> List[str]:
    """
    Extract skills from a profile.

    Bulleted or numbered lines are preferred. When the section has none,
    the body is treated as comma- or newline-separated text.

    Args:
        document: Full profile markdown

    Returns:
        Deduplicated skills in first-seen order
    """
    body = locate_section(document, SectionAliases.SKILLS)
    if body is None:
        log_section_absent("skills")
        return []

    skills = collect_bullet_items(body)
    if not skills:
        skills = split_delimited_items(body)

    return dedupe(skills)


def parse_interests(document: str) -> List[str]:
    """
    Extract interests (companies, groups, schools, people followed).

    Link labels anywhere in the section come first, followed by the plain
    text of bulleted lines.

    Args:
        document: Full profile markdown

    Returns:
        Deduplicated interests in first-seen order
    """
    body = locate_section(document, SectionAliases.INTERESTS)
    if body is None:
        log_section_absent("interests")
        return []

    interests = collect_link_labels(body) + collect_bullet_items(body, stop_at_link=True)
    return dedupe(interests)


def extract_linkedin_urls(text: str) -> Tuple[List[str], List[str]]:
    """
    Find LinkedIn company and school URLs linked anywhere in a profile.

    Args:
        text: Profile markdown

    Returns:
        (company_urls, school_urls), each deduplicated in first-seen order
    """
    company_urls = []
    school_urls = []

    for match in ListPatterns.LINKEDIN_ENTITY_LINK.finditer(text):
        url = match.group(2)
        if "/company/" in url:
            company_urls.append(url)
        elif "/school/" in url:
            school_urls.append(url)

    return dedupe(company_urls), dedupe(school_urls)
