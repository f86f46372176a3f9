"""
Unit tests for similarity scoring and the similarity cache.
"""
import pytest

from seoassist.nlp.similarity import SimilarityCache, similarity


class TestSimilarity:
    """Tests for the Jaro-Winkler scorer."""

    def test_identical_strings_score_one(self):
        assert similarity("keyword", "keyword") == pytest.approx(1.0)

    def test_is_symmetric(self):
        assert similarity("martha", "marhta") == pytest.approx(similarity("marhta", "martha"))

    def test_classic_jaro_winkler_value(self):
        """MARTHA/MARHTA is the textbook Jaro-Winkler example."""
        assert similarity("martha", "marhta") == pytest.approx(0.961, abs=1e-3)

    def test_unrelated_short_words_score_low(self):
        assert similarity("fox", "dog") < 0.6

    def test_is_case_sensitive(self):
        assert similarity("Fox", "fox") < 1.0

    def test_scores_stay_in_unit_range(self):
        for a, b in [("", "abc"), ("abc", "xyz"), ("seo", "seo tips")]:
            assert 0.0 <= similarity(a, b) <= 1.0


class TestSimilarityCache:
    """Tests for cache keys, lookups and eviction."""

    def test_key_lowercases_and_joins_with_colon(self):
        assert SimilarityCache.make_key("Fox", "DOG") == "fox:dog"

    def test_miss_returns_none(self, cache):
        assert cache.get("fox", "dog") is None
        assert cache.misses == 1

    def test_put_then_get(self, cache):
        cache.put("fox", "dog", 0.55)
        assert cache.get("fox", "dog") == 0.55
        assert cache.hits == 1

    def test_lookup_ignores_case(self, cache):
        cache.put("Fox", "Dog", 0.55)
        assert cache.get("fox", "dog") == 0.55
        assert "fox:dog" in cache

    def test_zero_score_is_a_hit(self, cache):
        cache.put("fox", "seo", 0.0)
        assert cache.get("fox", "seo") == 0.0

    def test_evicts_least_recently_used(self):
        cache = SimilarityCache(max_size=2)
        cache.put("a", "k", 0.1)
        cache.put("b", "k", 0.2)
        cache.get("a", "k")  # refresh "a"
        cache.put("c", "k", 0.3)

        assert len(cache) == 2
        assert cache.get("b", "k") is None
        assert cache.get("a", "k") == 0.1
        assert cache.get("c", "k") == 0.3

    def test_unbounded_cache_keeps_everything(self):
        cache = SimilarityCache(max_size=None)
        for i in range(500):
            cache.put(f"word{i}", "k", 0.5)
        assert len(cache) == 500

    def test_rejects_non_positive_size(self):
        with pytest.raises(ValueError):
            SimilarityCache(max_size=0)

    def test_clear_resets_entries_and_counters(self, cache):
        cache.put("a", "k", 0.1)
        cache.get("a", "k")
        cache.clear()

        assert len(cache) == 0
        assert cache.stats() == {"size": 0, "max_size": 100, "hits": 0, "misses": 0}
