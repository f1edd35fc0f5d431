"""
Embedding generation for extracted keywords.
"""

from prism.contexts.enrichment.logger import _log_info, _log_warning
from prism.utils.llm import LLMProvider


def generate_embedding(keywords: list[str], provider: LLMProvider) -> list[float]:
    """
    Embed a profile's keywords as a single vector.

    Keywords are joined with spaces. An empty keyword list produces an empty
    vector without calling the provider. Provider errors propagate.

    Args:
        keywords: Keywords from extract_keywords()
        provider: Provider that supports embed() (e.g., OpenAIProvider)

    Returns:
        Embedding vector, or [] for no keywords
    """
    text = " ".join(k.strip() for k in keywords if k.strip())
    if not text:
        _log_warning("No keywords to embed")
        return []

    _log_info(f"Generating embedding with {provider.name}")
    embedding = provider.embed(text)
    _log_info(f"Embedding generated: {len(embedding)} dimensions")
    return embedding
