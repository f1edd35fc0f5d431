"""
LLM-based profile parsing.

An alternate implementation of "extract a ProfileRecord from raw markdown"
that hands the whole document to a model with a field schema instead of
running the deterministic matcher chains. Unlike parse_profile(), this can
fail (network, rate limits, malformed output) and its output may vary
between calls, so failures propagate to the caller.
"""

import json
from typing import Optional

from prism.contexts.enrichment.logger import _log_info, _log_warning, log_llm_usage
from prism.contexts.parsing.profile_data_structure import ProfileRecord
from prism.utils.llm import LLMProvider, parse_json_object

MAX_CONTENT_CHARS = 30000

# =============================================================================
# PROMPT TEMPLATES
# =============================================================================

_SYSTEM_PROMPT = """\
You are a profile extraction assistant. Extract structured data from a LinkedIn profile \
rendered as markdown. Return ONLY a JSON object matching the requested schema. Use clean \
text with no markdown. Omit optional fields you cannot find."""

_USER_PROMPT_TEMPLATE = """\
Extract a JSON object with these fields:

{schema_json}

---
Profile markdown:
{content}"""

# =============================================================================
# FIELD SCHEMA
# =============================================================================

_EDUCATION_SCHEMA = {
    "school": "Name of the school or institution (clean text, no markdown)",
    "degree": "Optional. Degree obtained (e.g., 'Bachelor of Science', 'Master's degree')",
    "fieldOfStudy": "Optional. Field of study (e.g., 'Computer Science')",
    "dateRange": "Optional. Date range (e.g., '2015 - 2019', '2020 - Present')",
    "schoolUrl": "Optional. LinkedIn URL for the school if available",
}

_PROJECT_SCHEMA = {
    "name": "Name of the project",
    "description": "Optional. Description of the project",
    "dateRange": "Optional. Date range or duration of the project",
    "associatedWith": "Optional. Associated company or organization",
}

_VOLUNTEER_SCHEMA = {
    "role": "Role or position held (e.g., 'Volunteer', 'Board Member')",
    "organization": "Name of the organization (clean text, no markdown)",
    "cause": "Optional. Cause or area of focus (e.g., 'Education', 'Environment')",
    "dateRange": "Optional. Date range of volunteering",
    "organizationUrl": "Optional. LinkedIn URL for the organization if available",
}

PROFILE_SCHEMA = {
    "name": "Full name of the person",
    "headline": "Professional headline or tagline (e.g., 'Software Engineer at Google')",
    "about": "About or summary section content. Return empty string if not present.",
    "experience": ["'Title at Company' string (e.g., 'Software Engineer at Google')"],
    "education": [_EDUCATION_SCHEMA],
    "projects": [_PROJECT_SCHEMA],
    "volunteering": [_VOLUNTEER_SCHEMA],
    "skills": ["One skill mentioned in the profile"],
    "interests": ["One interest, company followed, or group"],
}


def build_profile_prompt(raw_markdown: str) -> str:
    """
    Build the extraction prompt for a profile document.

    Args:
        raw_markdown: Profile markdown (truncated to MAX_CONTENT_CHARS)

    Returns:
        User prompt string for the LLM
    """
    return _USER_PROMPT_TEMPLATE.format(
        schema_json=json.dumps(PROFILE_SCHEMA, indent=2),
        content=raw_markdown[:MAX_CONTENT_CHARS],
    )


def parse_profile_with_llm(
    raw_markdown: str,
    author_name: str,
    provider: LLMProvider,
    image_url: Optional[str] = None,
    source_url: str = "",
) -> ProfileRecord:
    """
    Parse profile markdown with an LLM.

    Args:
        raw_markdown: Full profile markdown
        author_name: Display name from upstream metadata (used if the model omits one)
        provider: LLM provider instance
        image_url: Optional profile image URL
        source_url: Profile URL

    Returns:
        ProfileRecord built from the model's JSON; url, image and raw text
        always come from the inputs

    Raises:
        ValueError: If the response holds no JSON object
    """
    _log_info(f"Parsing profile with {provider.name}")
    response = provider.generate(
        system_prompt=_SYSTEM_PROMPT,
        user_prompt=build_profile_prompt(raw_markdown),
        json_output=True,
    )
    log_llm_usage("profile parse", response)

    data = parse_json_object(response.content)
    if not data:
        _log_warning("Model response held no JSON object")
        raise ValueError(f"Could not parse profile JSON from {provider.name} response")

    record = ProfileRecord.from_dict(data)
    record.name = record.name or author_name or ""
    record.url = source_url or ""
    record.image = image_url or None
    record.raw_text = raw_markdown
    return record
