"""
Language model providers and response parsing for the enrichment context.

Providers are explicit objects: construct one at startup and pass it to
whatever needs it. Nothing here caches a client globally. SDKs are imported
when a provider is constructed, so the parsing core never loads them.
"""

import json
import os
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass
from functools import partial
from typing import Callable, Iterator, Optional, TypeVar

from dotenv import load_dotenv
from loguru import logger

load_dotenv()

MAX_RETRIES = 5
BASE_DELAY = 1.0

DEFAULT_OPENAI_MODEL = "gpt-4o-mini"
DEFAULT_ANTHROPIC_MODEL = "claude-sonnet-4-20250514"
DEFAULT_EMBEDDING_MODEL = os.getenv("EMBEDDING_MODEL", "text-embedding-3-small")
MAX_OUTPUT_TOKENS = 4096

JSON_ONLY_INSTRUCTION = "Respond with a single JSON object and nothing else."

T = TypeVar("T")


def call_with_retries(
    request: Callable[[], T],
    retry_on: type[Exception],
    label: str,
    max_retries: int = MAX_RETRIES,
    base_delay: float = BASE_DELAY,
) -> T:
    """
    Run a request, sleeping 1s, 2s, 4s, ... between attempts on retry_on.

    Any other exception propagates immediately, as does retry_on once the
    attempts are used up.

    Args:
        request: Zero-argument callable performing one API call
        retry_on: Exception type signalling a transient failure (e.g., rate limit)
        label: Short description for the retry warning
        max_retries: Total attempts
        base_delay: Delay before the second attempt, doubled each time

    Returns:
        Whatever request returns
    """
    for attempt in range(1, max_retries + 1):
        try:
            return request()
        except retry_on:
            if attempt == max_retries:
                raise
            delay = base_delay * 2 ** (attempt - 1)
            logger.warning(f"{label}; attempt {attempt}/{max_retries} failed, waiting {delay:.1f}s")
            time.sleep(delay)


# =============================================================================
# PROVIDERS
# =============================================================================


@dataclass
class LLMResponse:
    """Text completion plus token accounting."""

    content: str
    model: str
    input_tokens: int
    output_tokens: int

    @property
    def total_tokens(self) -> int:
        return self.input_tokens + self.output_tokens


class LLMProvider(ABC):
    """
    Base class for chat (and optionally embedding) providers.

    Subclasses set _provider_prefix, _retryable_exception and _retry_message,
    call update_model() from __init__ and implement _call_api(). Providers
    that can embed text also override embed().
    """

    _provider_prefix: str
    _retryable_exception: type[Exception]
    _retry_message: str

    name: str
    model: str

    def update_model(self, model: str):
        """Switch model; name becomes "<prefix>/<model>"."""
        self.model = model
        self.name = f"{self._provider_prefix}/{model}"

    @abstractmethod
    def _call_api(self, system_prompt: str, user_prompt: str, json_output: bool) -> LLMResponse:
        """One chat request, no retries."""
        pass

    def generate(
        self, system_prompt: str, user_prompt: str, json_output: bool = False
    ) -> LLMResponse:
        """
        Send one system + user exchange, retrying transient failures.

        Args:
            system_prompt: Instructions for the model
            user_prompt: The request itself
            json_output: Ask for a JSON object (native JSON mode where available)
        """
        request = partial(self._call_api, system_prompt, user_prompt, json_output)
        return call_with_retries(request, self._retryable_exception, self._retry_message)

    def embed(self, text: str) -> list[float]:
        raise NotImplementedError(f"{self.name} does not support embeddings")


class AnthropicProvider(LLMProvider):
    """Claude chat provider. Has no JSON mode, so JSON is requested in the prompt."""

    _provider_prefix = "anthropic"
    _retry_message = "Anthropic rate limit"

    def __init__(self, model: str = DEFAULT_ANTHROPIC_MODEL):
        try:
            import anthropic
        except ImportError:
            raise ImportError("anthropic package required. Install with: pip install anthropic")

        api_key = os.getenv("ANTHROPIC_API_KEY")
        if not api_key:
            raise ValueError("ANTHROPIC_API_KEY environment variable not set")

        self.client = anthropic.Anthropic(api_key=api_key)
        self._retryable_exception = anthropic.RateLimitError
        self.update_model(model)

    def _call_api(self, system_prompt: str, user_prompt: str, json_output: bool) -> LLMResponse:
        if json_output:
            system_prompt = f"{system_prompt}\n\n{JSON_ONLY_INSTRUCTION}"

        message = self.client.messages.create(
            model=self.model,
            max_tokens=MAX_OUTPUT_TOKENS,
            system=system_prompt,
            messages=[{"role": "user", "content": user_prompt}],
        )
        text = "".join(block.text for block in message.content if block.type == "text")
        return LLMResponse(
            content=text,
            model=self.model,
            input_tokens=message.usage.input_tokens,
            output_tokens=message.usage.output_tokens,
        )


class OpenAIProvider(LLMProvider):
    """OpenAI chat provider that also serves embeddings."""

    _provider_prefix = "openai"
    _retry_message = "OpenAI rate limit"

    def __init__(
        self,
        model: str = DEFAULT_OPENAI_MODEL,
        embedding_model: str = DEFAULT_EMBEDDING_MODEL,
    ):
        try:
            import openai
        except ImportError:
            raise ImportError("openai package required. Install with: pip install openai")

        api_key = os.getenv("OPENAI_API_KEY")
        if not api_key:
            raise ValueError("OPENAI_API_KEY environment variable not set")

        self.client = openai.OpenAI(api_key=api_key)
        self._retryable_exception = openai.RateLimitError
        self.embedding_model = embedding_model
        self.update_model(model)

    def _call_api(self, system_prompt: str, user_prompt: str, json_output: bool) -> LLMResponse:
        options = {"response_format": {"type": "json_object"}} if json_output else {}
        completion = self.client.chat.completions.create(
            model=self.model,
            max_tokens=MAX_OUTPUT_TOKENS,
            messages=[
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": user_prompt},
            ],
            **options,
        )
        return LLMResponse(
            content=completion.choices[0].message.content or "",
            model=self.model,
            input_tokens=completion.usage.prompt_tokens,
            output_tokens=completion.usage.completion_tokens,
        )

    def _call_embeddings(self, text: str) -> list[float]:
        result = self.client.embeddings.create(
            model=self.embedding_model, input=text, encoding_format="float"
        )
        return list(result.data[0].embedding)

    def embed(self, text: str) -> list[float]:
        """Embed text with the embedding model, retrying on rate limits."""
        request = partial(self._call_embeddings, text)
        return call_with_retries(request, self._retryable_exception, self._retry_message)


PROVIDERS = {
    "anthropic": AnthropicProvider,
    "openai": OpenAIProvider,
}


def get_provider(provider_name: Optional[str] = None, model: Optional[str] = None) -> LLMProvider:
    """
    Construct a provider by name.

    Args:
        provider_name: "openai" or "anthropic" (default: LLM_PROVIDER env var, else "openai")
        model: Model name (default: the provider's own default)

    Returns:
        LLMProvider instance

    Raises:
        ValueError: For an unknown provider name or a missing API key
    """
    provider_name = (provider_name or os.getenv("LLM_PROVIDER", "openai")).lower()
    provider_cls = PROVIDERS.get(provider_name)
    if provider_cls is None:
        raise ValueError(
            f"Unknown provider: {provider_name}. Use one of: {', '.join(sorted(PROVIDERS))}"
        )
    return provider_cls(model) if model else provider_cls()


# =============================================================================
# RESPONSE PARSING
# =============================================================================


def _strip_code_fence(text: str) -> str:
    """Remove a surrounding ``` or ```json fence."""
    text = text.strip()
    if not text.startswith("```"):
        return text
    body = text.split("\n", 1)[1] if "\n" in text else ""
    body = body.rstrip()
    if body.endswith("```"):
        body = body[:-3]
    return body.strip()


def _json_candidates(text: str, opener: str, closer: str) -> Iterator[str]:
    """Yield the whole text, then the span from the first opener to the last closer."""
    yield text
    start, end = text.find(opener), text.rfind(closer)
    if start != -1 and end > start:
        yield text[start : end + 1]


def _load_first(text: str, opener: str, closer: str, expected: type):
    for candidate in _json_candidates(text, opener, closer):
        try:
            value = json.loads(candidate)
        except json.JSONDecodeError:
            continue
        if isinstance(value, expected):
            return value
    return None


def parse_array_response(text: str, fallback_count: int = 15) -> list[str]:
    """
    Recover a list of strings from model output.

    Tries the text as JSON, then the outermost [...] span, then falls back to
    one item per line with bullets and quotes trimmed.

    Args:
        text: Model response
        fallback_count: Most items kept from the line fallback

    Returns:
        List of strings (possibly empty)
    """
    text = _strip_code_fence(text)

    items = _load_first(text, "[", "]", list)
    if items is not None:
        return [str(item) for item in items]

    lines = []
    for line in text.split("\n"):
        line = line.strip().lstrip("-•*").strip().strip(",").strip('"')
        if line and line[0] not in "[]":
            lines.append(line)
    return lines[:fallback_count]


def parse_json_object(text: str) -> dict:
    """
    Recover a JSON object from model output.

    Handles code fences and prose around the object; the outermost braces
    are used so nested objects survive.

    Args:
        text: Model response

    Returns:
        Parsed dict, or {} if no object can be recovered
    """
    result = _load_first(_strip_code_fence(text), "{", "}", dict)
    return result if result is not None else {}
