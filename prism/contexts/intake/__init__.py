"""
Intake Context

Responsibilities:
- Fetches raw profile markdown and metadata from an upstream provider
- Validates profile URLs
- Runs the parse-then-enrich pipeline and persists results

Owns: Network access to the profile provider, result files
Never: Parses markdown itself (delegates to the parsing context)
"""

from prism.contexts.intake.exceptions import (
    EmptyProfileError,
    InvalidProfileURLError,
    ProfileFetchError,
)
from prism.contexts.intake.pipeline import ProfilePipeline, ScrapeResult
from prism.contexts.intake.profile_source import (
    ExaProfileSource,
    ProfileSource,
    ScrapedProfile,
    validate_profile_url,
)

__all__ = [
    "ProfilePipeline",
    "ScrapeResult",
    "ProfileSource",
    "ExaProfileSource",
    "ScrapedProfile",
    "validate_profile_url",
    "ProfileFetchError",
    "EmptyProfileError",
    "InvalidProfileURLError",
]
