"""
Enrichment Context

Responsibilities:
- Extracts descriptive keywords from parsed profiles with an LLM
- Embeds keywords as vectors
- Offers an LLM-based alternative to the deterministic parser

Owns: All language model calls
Never: Modifies how the deterministic parser reads markdown
"""

from prism.contexts.enrichment.embeddings import generate_embedding
from prism.contexts.enrichment.keywords import extract_keywords
from prism.contexts.enrichment.llm_parser import parse_profile_with_llm

__all__ = ["extract_keywords", "generate_embedding", "parse_profile_with_llm"]
