"""
Parsing Context

Responsibilities:
- Locates titled sections in profile markdown
- Splits sections into entry blocks and recovers fields with ordered matcher chains
- Assembles the structured ProfileRecord

Owns: Deterministic markdown-to-record extraction
Never: Performs network calls or calls a language model
"""

from prism.contexts.parsing.profile_data_structure import (
    EducationEntry,
    ProfileRecord,
    ProjectEntry,
    VolunteerEntry,
)
from prism.contexts.parsing.profile_parser import parse_profile, parse_profile_file

__all__ = [
    "parse_profile",
    "parse_profile_file",
    "ProfileRecord",
    "EducationEntry",
    "ProjectEntry",
    "VolunteerEntry",
]
