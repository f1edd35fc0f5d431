"""
Entry splitting for sections holding one list item per entry.

Experience, education, project and volunteering sections are partitioned at
their entry marker (a line-start token such as "- ### "). Skills and
interests are parsed holistically and never split.
"""

import re
from typing import List, Optional


def split_entries(section_body: Optional[str], entry_marker: re.Pattern) -> List[str]:
    """
    Split a section body into entry blocks at marker boundaries.

    Each block starts right after its marker and runs to the next marker or
    the end of the body. Text before the first marker is not an entry and is
    discarded, as are whitespace-only blocks. A body without any marker
    yields no entries.

    Args:
        section_body: Text returned by locate_section (None for an absent section)
        entry_marker: Compiled multiline pattern matching an entry start

    Returns:
        Stripped entry blocks in document order
    """
    if not section_body:
        return []

    starts = [match.end() for match in entry_marker.finditer(section_body)]
    if not starts:
        return []

    ends = [match.start() for match in entry_marker.finditer(section_body)][1:]
    ends.append(len(section_body))

    blocks = [section_body[start:end].strip() for start, end in zip(starts, ends)]
    return [block for block in blocks if block]
