"""
Tests for profile assembly: headline, about, totality and file parsing.
"""

import pytest

from prism.contexts.parsing import ProfileRecord, parse_profile, parse_profile_file
from prism.contexts.parsing.normalizer import preprocess_profile_markdown
from prism.contexts.parsing.profile_parser import extract_about, extract_headline


@pytest.mark.unit
class TestExtractHeadline:
    """Test the positional headline heuristic."""

    def test_second_line_when_first_has_name(self):
        text = "Ada Lovelace\nMathematician\n## About\nHi"
        assert extract_headline(text, "Ada Lovelace") == "Mathematician"

    def test_first_line_when_name_missing(self):
        text = "Mathematician and writer\nAda Lovelace"
        assert extract_headline(text, "Ada Lovelace") == "Mathematician and writer"

    def test_single_line_containing_name(self):
        assert extract_headline("Ada Lovelace, Mathematician", "Ada Lovelace") == (
            "Ada Lovelace, Mathematician"
        )

    def test_blank_lines_ignored(self):
        text = "\n\n  Ada Lovelace  \n\n  Mathematician  \n"
        assert extract_headline(text, "Ada Lovelace") == "Mathematician"

    def test_empty_document(self):
        assert extract_headline("", "Ada") == ""

    def test_empty_name_matches_first_line(self):
        """An empty name is contained in every line, so line two is used."""
        assert extract_headline("first\nsecond", "") == "second"


@pytest.mark.unit
class TestExtractAbout:
    """Test About/Summary section recovery."""

    def test_body_trimmed(self):
        text = "## About\n\n  Hello world  \n\n## Skills\n- Go"
        assert extract_about(text) == "Hello world"

    @pytest.mark.parametrize("header", ["About me", "About", "Summary", "SUMMARY"])
    def test_aliases(self, header):
        assert extract_about(f"## {header}\nHello") == "Hello"

    def test_absent(self):
        assert extract_about("## Skills\n- Go") == ""

    def test_body_cut_from_original(self):
        original = "##\u00a0About\nCaf\u00e9\u00a0au\u200blait\n## Skills"
        cleaned = preprocess_profile_markdown(original)
        assert extract_about(cleaned, original=original) == "Caf\u00e9\u00a0au\u200blait"


@pytest.mark.unit
class TestNormalizer:
    """Test markdown preprocessing."""

    def test_line_endings(self):
        assert preprocess_profile_markdown("a\r\nb\rc") == "a\nb\nc"

    def test_invisible_characters(self):
        text = "\ufeff##\u00a0Skills\n- Py\u200bthon"
        assert preprocess_profile_markdown(text) == "## Skills\n- Python"

    def test_content_characters_untouched(self):
        text = "José – Zürich “quoted”"
        assert preprocess_profile_markdown(text) == text


@pytest.mark.unit
class TestParseProfile:
    """Test parse_profile() record assembly."""

    @pytest.mark.parametrize(
        "text",
        [
            "",
            "   \n\t\n",
            "no headers at all",
            "## Education\n## Skills\n## About\n## Interests",
            "## \n###\n- ### \n- **\n",
            "## Experience\n- ### at [\n- ### at\n",
            "## Education\n- ### ||\n- ### , at [](\n- ### [x](\n",
            "## Projects\n- **\n- ###\n- ### [](\n",
            "## Volunteering\n- ** at **\nCause:\nDate:\n",
            "## Skills\n,,,\n#\n---\n",
            "## Interests\n- [](x)\n- [a](\n",
            "\r\n\r\n\u200b",
            "# " * 500,
        ],
    )
    def test_never_raises(self, text):
        """Any string produces a well-formed record."""
        record = parse_profile(text, "Ada")

        assert isinstance(record, ProfileRecord)
        assert isinstance(record.headline, str)
        assert isinstance(record.about, str)
        for values in (
            record.experience,
            record.education,
            record.projects,
            record.volunteering,
            record.skills,
            record.interests,
        ):
            assert isinstance(values, list)
        assert all(entry.school for entry in record.education)
        assert all(project.name for project in record.projects)
        assert all(v.role and v.organization for v in record.volunteering)

    def test_document_without_sections(self):
        record = parse_profile("Ada Lovelace\nMathematician", "Ada Lovelace")
        assert record.headline == "Mathematician"
        assert record.about == ""
        assert record.experience == []
        assert record.education == []
        assert record.projects == []
        assert record.volunteering == []
        assert record.skills == []
        assert record.interests == []

    def test_metadata_passed_through(self):
        raw = "Ada\r\nMathematician"
        record = parse_profile(
            raw, "Ada", image_url="https://img.example/ada.png", source_url="https://x.com/in/ada"
        )
        assert record.name == "Ada"
        assert record.image == "https://img.example/ada.png"
        assert record.url == "https://x.com/in/ada"
        assert record.raw_text == raw

    def test_empty_image_is_absent(self):
        record = parse_profile("Ada", "Ada", image_url="")
        assert record.image is None
        assert "image" not in record.to_dict()

    def test_parsing_is_idempotent(self):
        text = (
            "Ada\nMathematician\n## Experience\n- ### Analyst at Engine Co\n"
            "## Skills\n- Math\n- Math\n"
        )
        assert parse_profile(text, "Ada").to_json() == parse_profile(text, "Ada").to_json()

    def test_sections_are_independent(self):
        """Section order in the document does not matter."""
        skills = "## Skills\n- Go\n"
        experience = "## Experience\n- ### Dev at Acme\n"
        first = parse_profile(skills + experience, "")
        second = parse_profile(experience + skills, "")
        assert first.skills == second.skills == ["Go"]
        assert first.experience == second.experience == ["Dev at Acme"]

    def test_headline_and_about_keep_raw_characters(self):
        text = "Ada\r\nMath\u00a0and\u200bpoetry\r\n## About\r\nAnalytical\u00a0Engine\r\n"
        record = parse_profile(text, "Ada")
        assert record.headline == "Math\u00a0and\u200bpoetry"
        assert record.about == "Analytical\u00a0Engine"

    def test_hidden_characters_do_not_hide_about_header(self):
        record = parse_profile("\ufeff## About\nHi\u00a0there", "")
        assert record.about == "Hi\u00a0there"

    def test_parse_profile_file(self, tmp_path):
        path = tmp_path / "profile.md"
        path.write_text("Ada\nMathematician\n## Skills\n- Math\n", encoding="utf-8")

        record = parse_profile_file(path, author_name="Ada")
        assert record.headline == "Mathematician"
        assert record.skills == ["Math"]
