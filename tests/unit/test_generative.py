"""
Unit tests for LLM-based keyword insertion.
"""
from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest

from seoassist.insertion.generative import (
    GenerativeInserter,
    annotate_keyword,
    is_seo_related,
)


def completion(content):
    message = SimpleNamespace(content=content)
    return SimpleNamespace(choices=[SimpleNamespace(message=message)])


@pytest.fixture
def client():
    return MagicMock()


class TestAnnotation:
    """Tests for SEO hashtag annotation."""

    def test_detects_seo_related_keywords(self):
        assert is_seo_related("Local SEO")
        assert is_seo_related("search engine ranking")
        assert not is_seo_related("gardening")

    def test_plain_keyword_is_unchanged(self):
        assert annotate_keyword("gardening") == "gardening"

    def test_seo_keyword_gets_hashtags(self):
        annotated = annotate_keyword("SEO tips")
        assert annotated.startswith("SEO tips (#SEO #DigitalMarketing")
        assert annotated.endswith("#MarketingTrends2025 #GrowYourBusiness)")
        assert "#SocialMediaMarketing" not in annotated


class TestGenerativeInserter:
    """Tests for rewrite and fallback behavior."""

    def test_uses_model_rewrite(self, client):
        client.chat.completions.create.return_value = completion(
            "Our Garden Tools make spring easier."
        )
        inserter = GenerativeInserter(client=client, model="gpt-test")

        result = inserter.insert("Our tools make spring easier.", "garden tools")

        assert result.updated_text == "Our Garden Tools make spring easier."
        assert result.inserted_at == 4
        assert result.keyword_length == len("garden tools")
        assert result.strategy == "generative"

        kwargs = client.chat.completions.create.call_args.kwargs
        assert kwargs["model"] == "gpt-test"
        assert 'Insert the keyword "garden tools"' in kwargs["messages"][0]["content"]

    def test_appends_when_model_omits_keyword(self, client):
        client.chat.completions.create.return_value = completion("Unchanged text.")
        inserter = GenerativeInserter(client=client)

        result = inserter.insert("Unchanged text.", "SEO tips")

        assert result.updated_text.startswith("Unchanged text. SEO tips (#SEO")
        assert result.inserted_at == len("Unchanged text. ")
        assert result.inserted_span == "SEO tips"
        assert result.strategy == "generative_append"

    def test_appends_when_request_fails(self, client):
        client.chat.completions.create.side_effect = RuntimeError("rate limited")
        inserter = GenerativeInserter(client=client)

        result = inserter.insert("Some text\n", "gardening")

        assert result.updated_text == "Some text\ngardening"
        assert result.inserted_at == len("Some text\n")

    def test_appends_without_api_key(self, monkeypatch):
        monkeypatch.setattr("seoassist.insertion.generative.Config.OPENAI_API_KEY", None)
        inserter = GenerativeInserter()

        assert not inserter.is_configured
        result = inserter.insert("Some text", "gardening")
        assert result.updated_text == "Some text gardening"
        assert result.inserted_span == "gardening"
