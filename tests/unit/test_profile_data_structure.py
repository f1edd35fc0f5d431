"""
Tests for profile data structures and the JSON wire format.
"""

import json

import pytest

from prism.contexts.parsing.profile_data_structure import (
    EducationEntry,
    ProfileRecord,
    ProjectEntry,
    VolunteerEntry,
)


@pytest.fixture
def record() -> ProfileRecord:
    return ProfileRecord(
        name="José Ramírez",
        headline="Engineer",
        about="Builds things",
        experience=["Engineer at Acme"],
        education=[EducationEntry(school="MIT", degree="B.S.", date_range="2015 - 2019")],
        projects=[ProjectEntry(name="Compiler", associated_with="Acme")],
        volunteering=[VolunteerEntry(role="Mentor", organization="Code Club", cause="Education")],
        skills=["Python"],
        interests=["Chess"],
        url="https://www.linkedin.com/in/jose",
        raw_text="raw",
    )


@pytest.mark.unit
class TestToDict:
    """Test camelCase serialization with absent fields omitted."""

    def test_entry_optional_fields_omitted(self):
        assert EducationEntry(school="MIT", school_url="https://x.com").to_dict() == {
            "school": "MIT",
            "schoolUrl": "https://x.com",
        }
        assert ProjectEntry(name="Compiler").to_dict() == {"name": "Compiler"}

    def test_volunteer_keys(self):
        entry = VolunteerEntry(
            role="Mentor",
            organization="Code Club",
            cause="Education",
            date_range="2018 - Present",
            organization_url="https://x.com/club",
        )
        assert entry.to_dict() == {
            "role": "Mentor",
            "organization": "Code Club",
            "cause": "Education",
            "dateRange": "2018 - Present",
            "organizationUrl": "https://x.com/club",
        }

    def test_record_keys(self, record):
        data = record.to_dict()
        assert list(data) == [
            "name",
            "headline",
            "about",
            "experience",
            "education",
            "projects",
            "volunteering",
            "skills",
            "interests",
            "url",
            "rawText",
        ]
        assert data["education"] == [
            {"school": "MIT", "degree": "B.S.", "dateRange": "2015 - 2019"}
        ]

    def test_image_included_when_present(self, record):
        record.image = "https://img.example/a.png"
        assert record.to_dict()["image"] == "https://img.example/a.png"

    def test_empty_record(self):
        data = ProfileRecord().to_dict()
        assert data["experience"] == []
        assert data["about"] == ""
        assert "image" not in data

    def test_to_json_keeps_unicode(self, record):
        text = record.to_json()
        assert "José Ramírez" in text
        assert json.loads(text)["name"] == "José Ramírez"


@pytest.mark.unit
class TestFromDict:
    """Test tolerant construction from wire-format data."""

    def test_round_trip(self, record):
        assert ProfileRecord.from_dict(record.to_dict()) == record

    def test_missing_keys_default(self):
        assert ProfileRecord.from_dict({}) == ProfileRecord()

    def test_invalid_entries_dropped(self):
        data = {
            "education": [{"degree": "B.S."}, {"school": "MIT"}, "not a dict"],
            "projects": [{"description": "no name"}, {"name": " Compiler "}],
            "volunteering": [{"role": "Mentor"}, {"role": "Mentor", "organization": "Club"}],
        }
        record = ProfileRecord.from_dict(data)
        assert record.education == [EducationEntry(school="MIT")]
        assert record.projects == [ProjectEntry(name="Compiler")]
        assert record.volunteering == [VolunteerEntry(role="Mentor", organization="Club")]

    def test_blank_strings_dropped_from_lists(self):
        record = ProfileRecord.from_dict({"skills": ["Python", "  ", ""], "experience": None})
        assert record.skills == ["Python"]
        assert record.experience == []

    def test_string_instead_of_list(self):
        record = ProfileRecord.from_dict(
            {
                "skills": "Python, Go,",
                "interests": "Chess",
                "experience": "Engineer at Acme, Inc.\nMentor at Code Club",
            }
        )
        assert record.skills == ["Python", "Go"]
        assert record.interests == ["Chess"]
        assert record.experience == ["Engineer at Acme, Inc.", "Mentor at Code Club"]

    def test_non_list_values_become_empty(self):
        record = ProfileRecord.from_dict(
            {"skills": 42, "interests": {"a": 1}, "education": "MIT", "projects": 3}
        )
        assert record.skills == []
        assert record.interests == []
        assert record.education == []
        assert record.projects == []

    def test_single_entry_object_instead_of_list(self):
        record = ProfileRecord.from_dict({"education": {"school": "MIT"}})
        assert record.education == [EducationEntry(school="MIT")]

    def test_non_string_list_items_dropped(self):
        record = ProfileRecord.from_dict({"skills": ["Python", None, 3, ["Go"]]})
        assert record.skills == ["Python"]

    def test_blank_optional_fields_absent(self):
        entry = EducationEntry.from_dict({"school": "MIT", "degree": "  "})
        assert entry.degree is None
