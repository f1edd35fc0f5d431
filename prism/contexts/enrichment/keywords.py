"""
LLM-based keyword extraction for parsed profiles.

Summarizes a ProfileRecord into a prompt and asks the model for the short
phrases that best describe the person. Operates on the parser's output only.
"""

from prism.contexts.enrichment.logger import _log_info, _log_warning, log_llm_usage
from prism.contexts.parsing.profile_data_structure import ProfileRecord
from prism.utils.llm import LLMProvider, parse_array_response, parse_json_object

DEFAULT_KEYWORD_COUNT = 15

NONE_LISTED = "None listed"

# =============================================================================
# PROMPT TEMPLATES
# =============================================================================

_SYSTEM_PROMPT = """\
You are an expert at analyzing professional identities.
Return ONLY a JSON object of the form {"keywords": ["...", "..."]}."""

_USER_PROMPT_TEMPLATE = """\
Analyze the following LinkedIn profile data and extract {count} distinct, high-value \
keywords or short phrases that define this person's professional 'vibe', skills, and \
interests for a matching algorithm.

Profile Data:
Name: {name}
Headline: {headline}
About: {about}
Experience: {experience}
Education: {education}
Skills: {skills}
Projects: {projects}
Volunteering: {volunteering}
Interests: {interests}

Example: {{"keywords": ["Software Engineering", "React", "Leadership", "Startup Scaling"]}}"""


def build_keyword_prompt(profile: ProfileRecord, count: int = DEFAULT_KEYWORD_COUNT) -> str:
    """
    Build the user prompt describing a profile.

    Args:
        profile: Parsed profile
        count: Number of keywords to ask for

    Returns:
        User prompt string for the LLM
    """
    projects = "\n".join(
        f"{p.name}: {p.description}" if p.description else p.name for p in profile.projects
    )
    volunteering = "\n".join(
        f"{v.role} at {v.organization}" + (f" ({v.cause})" if v.cause else "")
        for v in profile.volunteering
    )
    education = "\n".join(f"{e.degree or ''} at {e.school}".strip() for e in profile.education)

    return _USER_PROMPT_TEMPLATE.format(
        count=count,
        name=profile.name,
        headline=profile.headline,
        about=profile.about,
        experience="\n".join(profile.experience),
        education=education,
        skills=", ".join(profile.skills),
        projects=projects or NONE_LISTED,
        volunteering=volunteering or NONE_LISTED,
        interests=", ".join(profile.interests) or NONE_LISTED,
    )


def parse_keyword_response(text: str) -> list[str]:
    """
    Recover the keyword list from a model response.

    Accepts a bare JSON array, {"keywords": [...]}, or any object whose
    first list value holds the keywords.

    Args:
        text: LLM response text

    Returns:
        Keyword strings (possibly empty)
    """
    result = parse_json_object(text)
    if result:
        if isinstance(result.get("keywords"), list):
            return [str(k).strip() for k in result["keywords"] if str(k).strip()]
        for value in result.values():
            if isinstance(value, list):
                return [str(k).strip() for k in value if str(k).strip()]
        return []

    return [k.strip() for k in parse_array_response(text) if k.strip()]


def extract_keywords(
    profile: ProfileRecord,
    provider: LLMProvider,
    count: int = DEFAULT_KEYWORD_COUNT,
) -> list[str]:
    """
    Extract descriptive keywords for a profile using an LLM.

    A failed call yields an empty list so the rest of the pipeline can still
    return the parsed profile.

    Args:
        profile: Parsed profile
        provider: LLM provider instance
        count: Number of keywords to ask for

    Returns:
        Keyword strings (empty on failure)
    """
    _log_info(f"Extracting keywords with {provider.name}")
    try:
        response = provider.generate(
            system_prompt=_SYSTEM_PROMPT,
            user_prompt=build_keyword_prompt(profile, count),
            json_output=True,
        )
    except Exception as e:
        _log_warning(f"Keyword extraction failed: {e}")
        return []

    log_llm_usage("keywords", response)
    keywords = parse_keyword_response(response.content)
    if not keywords:
        _log_warning("Model returned no keywords")
    return keywords
