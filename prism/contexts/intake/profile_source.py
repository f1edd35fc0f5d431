"""
Upstream profile sources for the Intake context.

A source turns a profile URL into raw markdown plus the metadata the parser
cannot recover itself (author name, image). The parsing core never calls a
source; the pipeline does.
"""

import os
import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from prism.contexts.intake.exceptions import (
    EmptyProfileError,
    InvalidProfileURLError,
    ProfileFetchError,
)
from prism.contexts.intake.logger import _log_debug, _log_info

load_dotenv()

PROFILE_URL_PATTERN = re.compile(
    r"^https?://(?:[\w-]+\.)?linkedin\.com/in/[^\s/?#]+", re.IGNORECASE
)


@dataclass(frozen=True)
class ScrapedProfile:
    """Raw profile content delivered by an upstream source."""

    text: str
    author: str
    url: str
    image: Optional[str] = None


def validate_profile_url(url: str) -> str:
    """
    Check that a URL points at a LinkedIn profile.

    Args:
        url: Candidate profile URL

    Returns:
        The URL, stripped of surrounding whitespace

    Raises:
        InvalidProfileURLError: If the URL is not an http(s) linkedin.com/in/ URL
    """
    url = (url or "").strip()
    if not PROFILE_URL_PATTERN.match(url):
        raise InvalidProfileURLError(
            f"Invalid LinkedIn profile URL: '{url}'. Must contain 'linkedin.com/in/'"
        )
    return url


class ProfileSource(ABC):
    """
    Abstract base for upstream profile providers.

    Subclasses implement fetch() and raise ProfileFetchError (or
    EmptyProfileError) instead of provider-specific exceptions.
    """

    name: str

    @abstractmethod
    def fetch(self, url: str) -> ScrapedProfile:
        """Fetch one profile by URL."""
        pass


class ExaProfileSource(ProfileSource):
    """Profile source backed by the Exa contents API."""

    name = "exa"

    def __init__(self, api_key: Optional[str] = None):
        # Lazy import - only load the SDK if this source is used
        try:
            from exa_py import Exa
        except ImportError:
            raise ImportError("exa-py package required. Install with: pip install exa-py")

        api_key = api_key or os.getenv("EXASEARCH_API_KEY")
        if not api_key:
            raise ValueError("EXASEARCH_API_KEY environment variable not set")

        self.client = Exa(api_key=api_key)

    def fetch(self, url: str) -> ScrapedProfile:
        """
        Fetch a profile's rendered markdown from Exa.

        Args:
            url: LinkedIn profile URL

        Returns:
            ScrapedProfile with text, author and image

        Raises:
            ProfileFetchError: If the API call fails
            EmptyProfileError: If Exa returns no results or empty text
        """
        _log_info(f"Fetching profile from Exa: {url}")
        try:
            response = self.client.get_contents([url], text=True)
        except Exception as e:
            raise ProfileFetchError("Exa request failed", url=url, reason=str(e)) from e

        results = getattr(response, "results", None) or []
        if not results:
            raise EmptyProfileError("No results from Exa", url=url)

        result = results[0]
        text = getattr(result, "text", None) or ""
        if not text.strip():
            raise EmptyProfileError("Exa returned an empty profile", url=url)

        _log_debug(f"Received {len(text)} characters of markdown")
        return ScrapedProfile(
            text=text,
            author=getattr(result, "author", None) or "",
            url=url,
            image=getattr(result, "image", None) or None,
        )
