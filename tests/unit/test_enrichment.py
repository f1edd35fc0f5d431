"""
Tests for keyword extraction, embeddings and the LLM-based parser.

Uses in-process fake providers, so no API keys or network are needed.
"""

import json

import pytest

from prism.contexts.enrichment import extract_keywords, generate_embedding, parse_profile_with_llm
from prism.contexts.enrichment.keywords import build_keyword_prompt, parse_keyword_response
from prism.contexts.enrichment.llm_parser import MAX_CONTENT_CHARS, build_profile_prompt
from prism.contexts.parsing.profile_data_structure import (
    EducationEntry,
    ProfileRecord,
    ProjectEntry,
)
from prism.utils.llm import LLMProvider, LLMResponse


class FakeProvider(LLMProvider):
    """Provider returning a canned response (or raising a canned error)."""

    _provider_prefix = "fake"
    _retry_message = "Fake rate limit"
    _retryable_exception = TimeoutError

    def __init__(self, content: str = "", error: Exception = None):
        self.content = content
        self.error = error
        self.calls = []
        self.update_model("test-model")

    def _call_api(self, system_prompt: str, user_prompt: str, json_output: bool) -> LLMResponse:
        self.calls.append({"system": system_prompt, "user": user_prompt, "json": json_output})
        if self.error:
            raise self.error
        return LLMResponse(content=self.content, model=self.model, input_tokens=10, output_tokens=5)


class FakeEmbedder(FakeProvider):
    """Fake provider that also supports embeddings."""

    def __init__(self, vector: list[float]):
        super().__init__()
        self.vector = vector
        self.embedded = []

    def embed(self, text: str) -> list[float]:
        self.embedded.append(text)
        return list(self.vector)


@pytest.fixture
def profile() -> ProfileRecord:
    return ProfileRecord(
        name="Ada Lovelace",
        headline="Mathematician",
        about="Poetical science",
        experience=["Analyst at Engine Co"],
        education=[EducationEntry(school="University of London", degree="Tutoring")],
        projects=[ProjectEntry(name="Note G", description="First algorithm")],
        skills=["Mathematics", "Programming"],
    )


@pytest.mark.unit
class TestKeywordPrompt:
    """Test the profile summary sent to the model."""

    def test_contains_profile_fields(self, profile):
        prompt = build_keyword_prompt(profile, count=10)
        assert "extract 10 distinct" in prompt
        assert "Name: Ada Lovelace" in prompt
        assert "Analyst at Engine Co" in prompt
        assert "Tutoring at University of London" in prompt
        assert "Note G: First algorithm" in prompt
        assert "Skills: Mathematics, Programming" in prompt

    def test_empty_sections_marked(self, profile):
        prompt = build_keyword_prompt(profile)
        assert "Volunteering: None listed" in prompt
        assert "Interests: None listed" in prompt


@pytest.mark.unit
class TestParseKeywordResponse:
    """Test keyword recovery from the different response shapes."""

    def test_keywords_object(self):
        assert parse_keyword_response('{"keywords": ["Python", " ML ", ""]}') == ["Python", "ML"]

    def test_other_list_key(self):
        assert parse_keyword_response('{"terms": ["Python"]}') == ["Python"]

    def test_bare_array(self):
        assert parse_keyword_response('["Python", "ML"]') == ["Python", "ML"]

    def test_object_without_list(self):
        assert parse_keyword_response('{"keywords": "Python"}') == []


@pytest.mark.unit
class TestExtractKeywords:
    """Test extract_keywords() against a fake provider."""

    def test_returns_keywords(self, profile):
        provider = FakeProvider(json.dumps({"keywords": ["Mathematics", "Algorithms"]}))
        assert extract_keywords(profile, provider) == ["Mathematics", "Algorithms"]

        call = provider.calls[0]
        assert call["json"] is True
        assert "Ada Lovelace" in call["user"]

    def test_provider_failure_returns_empty(self, profile):
        provider = FakeProvider(error=RuntimeError("connection reset"))
        assert extract_keywords(profile, provider) == []

    def test_unparseable_response_returns_empty(self, profile):
        assert extract_keywords(profile, FakeProvider("")) == []


@pytest.mark.unit
class TestGenerateEmbedding:
    """Test generate_embedding() keyword joining and edge cases."""

    def test_keywords_joined_with_spaces(self):
        embedder = FakeEmbedder([0.1, 0.2, 0.3])
        assert generate_embedding(["Python", " ML "], embedder) == [0.1, 0.2, 0.3]
        assert embedder.embedded == ["Python ML"]

    @pytest.mark.parametrize("keywords", [[], ["", "  "]])
    def test_no_keywords_skips_call(self, keywords):
        embedder = FakeEmbedder([0.1])
        assert generate_embedding(keywords, embedder) == []
        assert embedder.embedded == []

    def test_provider_without_embeddings_raises(self):
        with pytest.raises(NotImplementedError):
            generate_embedding(["Python"], FakeProvider())


@pytest.mark.unit
class TestParseProfileWithLLM:
    """Test the LLM-based alternative parser."""

    def test_builds_record_from_json(self):
        content = json.dumps(
            {
                "headline": "Mathematician",
                "experience": ["Analyst at Engine Co"],
                "education": [{"school": "University of London"}, {"degree": "no school"}],
                "skills": ["Mathematics"],
            }
        )
        provider = FakeProvider(content)
        record = parse_profile_with_llm(
            "Ada\nMathematician",
            "Ada Lovelace",
            provider,
            image_url="https://img.example/ada.png",
            source_url="https://www.linkedin.com/in/ada",
        )

        assert record.name == "Ada Lovelace"
        assert record.headline == "Mathematician"
        assert record.education == [EducationEntry(school="University of London")]
        assert record.skills == ["Mathematics"]
        assert record.url == "https://www.linkedin.com/in/ada"
        assert record.image == "https://img.example/ada.png"
        assert record.raw_text == "Ada\nMathematician"
        assert provider.calls[0]["json"] is True

    def test_string_valued_lists_not_split_into_characters(self):
        provider = FakeProvider(
            json.dumps(
                {"name": "Ada", "skills": "Python, Go", "experience": "Engineer at Acme"}
            )
        )
        record = parse_profile_with_llm("text", "Ada", provider)

        assert record.skills == ["Python", "Go"]
        assert record.experience == ["Engineer at Acme"]

    def test_schema_describes_lists_as_arrays(self):
        prompt = build_profile_prompt("text")
        schema = json.loads(prompt[prompt.index("{") : prompt.index("---")])
        for key in ("experience", "skills", "interests", "education"):
            assert isinstance(schema[key], list)

    def test_model_name_preferred(self):
        provider = FakeProvider('{"name": "Augusta Ada King"}')
        assert parse_profile_with_llm("text", "Ada", provider).name == "Augusta Ada King"

    def test_no_json_raises(self):
        with pytest.raises(ValueError):
            parse_profile_with_llm("text", "Ada", FakeProvider("I cannot help with that"))

    def test_provider_errors_propagate(self):
        with pytest.raises(RuntimeError):
            parse_profile_with_llm("text", "Ada", FakeProvider(error=RuntimeError("down")))

    def test_prompt_truncates_content(self):
        prompt = build_profile_prompt("x" * (MAX_CONTENT_CHARS + 500))
        assert "x" * MAX_CONTENT_CHARS in prompt
        assert "x" * (MAX_CONTENT_CHARS + 1) not in prompt
        assert '"fieldOfStudy"' in prompt
