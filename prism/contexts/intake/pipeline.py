"""
Parse-then-enrich pipeline for the Intake context.

Wires an upstream profile source, the parsing core and the optional
enrichment steps together. Every collaborator is passed in explicitly, so
one set of clients built at startup can serve many runs.
"""

import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from prism.contexts.enrichment.embeddings import generate_embedding
from prism.contexts.enrichment.keywords import extract_keywords
from prism.contexts.enrichment.llm_parser import parse_profile_with_llm
from prism.contexts.intake.logger import _log_info, _log_success, _log_warning
from prism.contexts.intake.profile_source import (
    ProfileSource,
    ScrapedProfile,
    validate_profile_url,
)
from prism.contexts.parsing.profile_data_structure import ProfileRecord
from prism.contexts.parsing.profile_parser import parse_profile
from prism.utils.llm import LLMProvider

load_dotenv()

RESULT_FILE = Path(os.getenv("RESULT_FILE", "result.json"))


@dataclass
class ScrapeResult:
    """Parsed profile plus its enrichment outputs."""

    profile: ProfileRecord
    keywords: list[str] = field(default_factory=list)
    embedding: list[float] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "profile": self.profile.to_dict(),
            "keywords": list(self.keywords),
            "embedding": list(self.embedding),
        }

    def save(self, path: Optional[Path] = None) -> Path:
        """
        Write the result as indented JSON.

        Args:
            path: Output file (default: RESULT_FILE)

        Returns:
            Path written
        """
        path = Path(path) if path else RESULT_FILE
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(self.to_dict(), indent=2, ensure_ascii=False), encoding="utf-8")
        _log_info(f"Result saved to {path}")
        return path


@dataclass
class ProfilePipeline:
    """
    Fetch, parse and enrich one profile per run.

    Attributes:
        source: Upstream profile provider
        llm: Provider for keyword extraction (and LLM parsing); None skips keywords
        embedder: Provider supporting embed(); None skips the embedding
        use_llm_parser: Parse with the LLM instead of the deterministic core
    """

    source: ProfileSource
    llm: Optional[LLMProvider] = None
    embedder: Optional[LLMProvider] = None
    use_llm_parser: bool = False

    def __post_init__(self):
        if self.use_llm_parser and self.llm is None:
            raise ValueError("use_llm_parser requires an llm provider")

    def parse(self, scraped: ScrapedProfile) -> ProfileRecord:
        """Turn fetched content into a ProfileRecord with the configured parser."""
        if self.use_llm_parser:
            return parse_profile_with_llm(
                scraped.text,
                scraped.author,
                self.llm,
                image_url=scraped.image,
                source_url=scraped.url,
            )
        return parse_profile(
            scraped.text, scraped.author, image_url=scraped.image, source_url=scraped.url
        )

    def run(self, url: str) -> ScrapeResult:
        """
        Run the full pipeline for one profile URL.

        Args:
            url: LinkedIn profile URL

        Returns:
            ScrapeResult with profile, keywords and embedding

        Raises:
            InvalidProfileURLError: If the URL is not a profile URL
            ProfileFetchError: If the source cannot deliver the profile
        """
        url = validate_profile_url(url)
        _log_info(f"Received scrape request for: {url}")

        scraped = self.source.fetch(url)
        profile = self.parse(scraped)
        _log_success(f"Profile scraped successfully: {profile.name or '(unnamed)'}")

        keywords = extract_keywords(profile, self.llm) if self.llm else []
        if self.llm:
            _log_info(f"Keywords extracted: {len(keywords)} keywords")

        embedding = generate_embedding(keywords, self.embedder) if self.embedder else []
        if self.embedder and not embedding:
            _log_warning("No embedding generated (keywords may be empty)")

        return ScrapeResult(profile=profile, keywords=keywords, embedding=embedding)
