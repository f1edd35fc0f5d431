"""
Tests for section location and entry splitting.
"""

import pytest

from prism.contexts.parsing.entry_splitter import split_entries
from prism.contexts.parsing.section_locator import (
    header_label,
    is_top_level_header,
    locate_section,
    locate_section_span,
)
from prism.contexts.parsing.section_patterns import (
    EntryMarkers,
    SectionAliases,
    normalize_section_name,
)


@pytest.mark.unit
class TestHeaderDetection:
    """Test which lines count as section boundaries."""

    @pytest.mark.parametrize("line", ["# Name", "## Experience", "##   Skills  ", "  ## About"])
    def test_top_level_headers(self, line):
        assert is_top_level_header(line)

    @pytest.mark.parametrize("line", ["### Engineer at Acme", "- ### Role", "#Skills", "Skills"])
    def test_not_top_level_headers(self, line):
        assert not is_top_level_header(line)

    def test_header_label(self):
        assert header_label("## Work Experience ") == "Work Experience"
        assert header_label("### Sub heading") is None

    def test_normalize_section_name(self):
        assert normalize_section_name("  Work   EXPERIENCE: ") == "work experience"


@pytest.mark.unit
class TestLocateSection:
    """Test locate_section() body boundaries and alias matching."""

    def test_body_runs_to_next_header(self):
        document = "## Skills\n- Python\n## About\nHi"
        assert locate_section(document, ("Skills",)) == "- Python"

    def test_body_runs_to_end_of_document(self):
        document = "## About\nline one\nline two"
        assert locate_section(document, SectionAliases.ABOUT) == "line one\nline two"

    def test_aliases_are_case_insensitive(self):
        document = "## WORK EXPERIENCE\n- ### Dev at Acme"
        assert locate_section(document, SectionAliases.EXPERIENCE) == "- ### Dev at Acme"

    def test_trailing_colon_in_header(self):
        assert locate_section("## Skills:\n- Go", SectionAliases.SKILLS) == "- Go"

    def test_absent_section_is_none(self):
        assert locate_section("## Skills\n- Go", SectionAliases.VOLUNTEERING) is None

    def test_header_without_body_is_empty(self):
        document = "## Skills\n## About\nHi"
        assert locate_section(document, SectionAliases.SKILLS) == ""

    def test_entry_subheadings_do_not_end_section(self):
        document = "## Experience\n- ### Dev at Acme\n### Notes\nmore\n## Skills\n- Go"
        body = locate_section(document, SectionAliases.EXPERIENCE)
        assert body == "- ### Dev at Acme\n### Notes\nmore"

    def test_first_matching_header_wins(self):
        document = "## Summary\nfirst\n## About\nsecond"
        assert locate_section(document, SectionAliases.ABOUT) == "first"

    def test_alias_must_match_whole_label(self):
        document = "## Skills and Endorsements\n- Go"
        assert locate_section(document, SectionAliases.SKILLS) is None

    def test_span_indexes_body_lines(self):
        lines = ["Ada", "## Skills", "- Go", "- Rust", "## About", "Hi"]
        assert locate_section_span(lines, SectionAliases.SKILLS) == (2, 4)
        assert locate_section_span(lines, SectionAliases.ABOUT) == (5, 6)
        assert locate_section_span(lines, SectionAliases.PROJECTS) is None


@pytest.mark.unit
class TestSplitEntries:
    """Test split_entries() partitioning at entry markers."""

    def test_splits_at_each_marker(self):
        body = "- ### Dev at A\n- ### Lead at B"
        assert split_entries(body, EntryMarkers.EXPERIENCE) == ["Dev at A", "Lead at B"]

    def test_continuation_lines_stay_with_entry(self):
        body = "- ### Dev at A\n  2019 - 2020\n  Built things\n- ### Lead at B"
        blocks = split_entries(body, EntryMarkers.EXPERIENCE)
        assert blocks == ["Dev at A\n  2019 - 2020\n  Built things", "Lead at B"]

    def test_preamble_is_discarded(self):
        body = "Some intro text\n- ### Dev at A"
        assert split_entries(body, EntryMarkers.EXPERIENCE) == ["Dev at A"]

    def test_no_markers_yields_no_entries(self):
        assert split_entries("Dev at A\nLead at B", EntryMarkers.EXPERIENCE) == []

    @pytest.mark.parametrize("body", [None, "", "   \n  "])
    def test_empty_bodies(self, body):
        assert split_entries(body, EntryMarkers.EXPERIENCE) == []

    def test_whitespace_only_blocks_dropped(self):
        body = "- ### \n- ### Lead at B"
        assert split_entries(body, EntryMarkers.EXPERIENCE) == ["Lead at B"]

    def test_education_marker_allows_missing_bullet(self):
        body = "### B.S. at MIT\n- ### M.S. at CMU"
        assert split_entries(body, EntryMarkers.EDUCATION) == ["B.S. at MIT", "M.S. at CMU"]

    def test_project_marker_accepts_bold_bullets(self):
        body = "- **Chatbot**\nA bot\n- ### Compiler"
        assert split_entries(body, EntryMarkers.PROJECT) == ["Chatbot**\nA bot", "Compiler"]

    def test_nested_list_items_are_not_markers(self):
        body = "- **Chatbot**\n  - used Python\n  - used Redis"
        assert split_entries(body, EntryMarkers.PROJECT) == [
            "Chatbot**\n  - used Python\n  - used Redis"
        ]
