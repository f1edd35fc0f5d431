"""
Profile data structures for the Parsing context.

Provides the entry types and the assembled ProfileRecord, plus conversion to
and from the JSON wire format (camelCase keys, absent optional fields omitted).
"""

import json
from dataclasses import dataclass, field
from typing import Any, Optional


def _compact(data: dict[str, Any]) -> dict[str, Any]:
    """Drop keys whose value is None."""
    return {key: value for key, value in data.items() if value is not None}


def _optional_str(data: dict, key: str) -> Optional[str]:
    """Read an optional string field, treating blanks as absent."""
    value = data.get(key)
    if value is None:
        return None
    value = str(value).strip()
    return value or None


@dataclass
class EducationEntry:
    """One education item. `school` is never empty."""

    school: str
    degree: Optional[str] = None
    field_of_study: Optional[str] = None
    date_range: Optional[str] = None
    school_url: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        return _compact(
            {
                "school": self.school,
                "degree": self.degree,
                "fieldOfStudy": self.field_of_study,
                "dateRange": self.date_range,
                "schoolUrl": self.school_url,
            }
        )

    @classmethod
    def from_dict(cls, data: dict) -> Optional["EducationEntry"]:
        school = _optional_str(data, "school")
        if not school:
            return None
        return cls(
            school=school,
            degree=_optional_str(data, "degree"),
            field_of_study=_optional_str(data, "fieldOfStudy"),
            date_range=_optional_str(data, "dateRange"),
            school_url=_optional_str(data, "schoolUrl"),
        )


@dataclass
class ProjectEntry:
    """One project item. `name` is never empty."""

    name: str
    description: Optional[str] = None
    date_range: Optional[str] = None
    associated_with: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        return _compact(
            {
                "name": self.name,
                "description": self.description,
                "dateRange": self.date_range,
                "associatedWith": self.associated_with,
            }
        )

    @classmethod
    def from_dict(cls, data: dict) -> Optional["ProjectEntry"]:
        name = _optional_str(data, "name")
        if not name:
            return None
        return cls(
            name=name,
            description=_optional_str(data, "description"),
            date_range=_optional_str(data, "dateRange"),
            associated_with=_optional_str(data, "associatedWith"),
        )


@dataclass
class VolunteerEntry:
    """One volunteering item. `role` and `organization` are never empty."""

    role: str
    organization: str
    cause: Optional[str] = None
    date_range: Optional[str] = None
    organization_url: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        return _compact(
            {
                "role": self.role,
                "organization": self.organization,
                "cause": self.cause,
                "dateRange": self.date_range,
                "organizationUrl": self.organization_url,
            }
        )

    @classmethod
    def from_dict(cls, data: dict) -> Optional["VolunteerEntry"]:
        role = _optional_str(data, "role")
        organization = _optional_str(data, "organization")
        if not role or not organization:
            return None
        return cls(
            role=role,
            organization=organization,
            cause=_optional_str(data, "cause"),
            date_range=_optional_str(data, "dateRange"),
            organization_url=_optional_str(data, "organizationUrl"),
        )


@dataclass
class ProfileRecord:
    """
    Structured profile assembled from one parse.

    Every list defaults to empty and every text field to "", so a record is
    well-formed even when the source document has no recognizable sections.
    """

    name: str = ""
    headline: str = ""
    about: str = ""
    experience: list[str] = field(default_factory=list)
    education: list[EducationEntry] = field(default_factory=list)
    projects: list[ProjectEntry] = field(default_factory=list)
    volunteering: list[VolunteerEntry] = field(default_factory=list)
    skills: list[str] = field(default_factory=list)
    interests: list[str] = field(default_factory=list)
    url: str = ""
    image: Optional[str] = None

    # Raw markdown kept for traceability
    raw_text: str = ""

    # =========================================================================
    # SERIALIZATION
    # =========================================================================

    def to_dict(self) -> dict[str, Any]:
        """
        Convert to the JSON wire format.

        Returns:
            Dict with camelCase keys; nested entries as dicts, absent
            optional fields omitted
        """
        return _compact(
            {
                "name": self.name,
                "headline": self.headline,
                "about": self.about,
                "experience": list(self.experience),
                "education": [entry.to_dict() for entry in self.education],
                "projects": [entry.to_dict() for entry in self.projects],
                "volunteering": [entry.to_dict() for entry in self.volunteering],
                "skills": list(self.skills),
                "interests": list(self.interests),
                "url": self.url,
                "image": self.image,
                "rawText": self.raw_text,
            }
        )

    def to_json(self, indent: Optional[int] = 2) -> str:
        """Serialize to a JSON string."""
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)

    @classmethod
    def from_dict(cls, data: dict) -> "ProfileRecord":
        """
        Build a record from wire-format data.

        Tolerates missing keys and drops nested entries that lack their
        required fields, so it also accepts loosely shaped LLM output.

        Args:
            data: Dict using the camelCase keys produced by to_dict()

        Returns:
            ProfileRecord instance
        """

        def strings(key: str, delimiter: str) -> list[str]:
            value = data.get(key)
            # Models sometimes answer with one delimited string instead of a list
            if isinstance(value, str):
                value = value.split(delimiter)
            if not isinstance(value, list):
                return []
            items = [item.strip() for item in value if isinstance(item, str)]
            return [item for item in items if item]

        def entries(key: str, entry_cls) -> list:
            value = data.get(key)
            if isinstance(value, dict):
                value = [value]
            if not isinstance(value, list):
                return []
            raw_items = [item for item in value if isinstance(item, dict)]
            parsed = [entry_cls.from_dict(item) for item in raw_items]
            return [item for item in parsed if item is not None]

        return cls(
            name=str(data.get("name") or ""),
            headline=str(data.get("headline") or ""),
            about=str(data.get("about") or ""),
            experience=strings("experience", "\n"),
            education=entries("education", EducationEntry),
            projects=entries("projects", ProjectEntry),
            volunteering=entries("volunteering", VolunteerEntry),
            skills=strings("skills", ","),
            interests=strings("interests", ","),
            url=str(data.get("url") or ""),
            image=_optional_str(data, "image"),
            raw_text=str(data.get("rawText") or ""),
        )
