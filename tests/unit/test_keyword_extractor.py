"""
Unit tests for TextRazor keyword extraction.
"""
from unittest.mock import MagicMock, patch

import pytest
import requests

from seoassist.analysis.keyword_extractor import KeywordExtractor, manual_keywords


def response_with(payload, status=200):
    response = MagicMock()
    response.status_code = status
    response.json.return_value = payload
    return response


@pytest.fixture
def extractor():
    return KeywordExtractor(api_key="test-key", api_url="https://textrazor.test", timeout_s=2)


class TestManualKeywords:
    """Tests for the offline fallback."""

    def test_keeps_long_non_stopwords(self):
        assert manual_keywords("This is about the garden tools market") == ["garden", "tools", "market"]

    def test_limits_to_five(self):
        assert len(manual_keywords("alpha bravo charlie delta foxtrot golf hotel")) == 5


class TestKeywordExtractor:
    """Tests for TextRazor responses."""

    @patch("seoassist.analysis.keyword_extractor.requests.post")
    def test_prefers_topic_labels(self, mock_post, extractor):
        mock_post.return_value = response_with({
            "response": {"topics": [{"label": "Gardening"}, {"label": "Tool"}]}
        })

        result = extractor.extract("Garden tools for spring.")

        assert result.keywords == ["Gardening", "Tool"]
        assert result.source == "textrazor_topics"

        kwargs = mock_post.call_args.kwargs
        assert kwargs["headers"]["x-textrazor-key"] == "test-key"
        assert kwargs["data"] == {"text": "Garden tools for spring.", "extractors": "topics,words"}
        assert kwargs["timeout"] == 2

    @patch("seoassist.analysis.keyword_extractor.requests.post")
    def test_falls_back_to_nouns(self, mock_post, extractor):
        mock_post.return_value = response_with({
            "response": {
                "sentences": [
                    {"words": [
                        {"token": "The", "lemma": "the", "partOfSpeech": "DT"},
                        {"token": "garden", "lemma": "garden", "partOfSpeech": "NN"},
                        {"token": "Bob", "lemma": "bob", "partOfSpeech": "NNP"},
                    ]},
                    {"words": [
                        {"token": "garden", "lemma": "garden", "partOfSpeech": "NN"},
                        {"token": "grows", "lemma": "grow", "partOfSpeech": "VBZ"},
                    ]},
                ]
            }
        })

        result = extractor.extract("The garden Bob. The garden grows.")

        assert result.keywords == ["garden", "Bob"]
        assert result.source == "textrazor_words"

    @patch("seoassist.analysis.keyword_extractor.requests.post")
    def test_request_failure_uses_manual_keywords(self, mock_post, extractor):
        mock_post.side_effect = requests.ConnectionError("unreachable")

        result = extractor.extract("Spring gardening needs sharp tools")

        assert result.source == "manual"
        assert result.keywords == ["Spring", "gardening", "needs", "sharp", "tools"]

    @patch("seoassist.analysis.keyword_extractor.requests.post")
    def test_http_error_uses_manual_keywords(self, mock_post, extractor):
        response = response_with({}, status=401)
        response.raise_for_status.side_effect = requests.HTTPError("401 Unauthorized")
        mock_post.return_value = response

        assert extractor.extract("Spring gardening").source == "manual"

    @patch("seoassist.analysis.keyword_extractor.requests.post")
    def test_missing_key_skips_request(self, mock_post, monkeypatch):
        monkeypatch.setattr("seoassist.analysis.keyword_extractor.Config.TEXTRAZOR_API_KEY", None)

        result = KeywordExtractor().extract("Spring gardening")

        mock_post.assert_not_called()
        assert result.source == "manual"
