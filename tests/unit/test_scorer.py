import pytest

from wikisearch.config import ScoringConfig
from wikisearch.retrieval.scorer import QueryScorer, content_score, location_score


def test_earlier_word_ranks_first(make_corpus) -> None:
    corpus = make_corpus({"doc1": ["alpha", "beta"], "doc2": ["beta", "beta", "alpha"]})

    results = QueryScorer(corpus).search("alpha")

    assert [result.url for result in results] == ["doc1", "doc2"]
    assert results[0].location_score > results[1].location_score
    assert results[0].content_score == results[1].content_score == 1.0


def test_content_score_counts_every_occurrence() -> None:
    assert content_score((0, 1, 0, 0, 2), frozenset({0})) == 3
    assert content_score((0, 1, 0, 0, 2), frozenset({0, 2})) == 4
    assert content_score((1, 1), frozenset({0})) == 0


def test_location_score_requires_every_query_word() -> None:
    assert location_score((5, 0, 1, 0), frozenset({0, 1})) == 2 + 3
    assert location_score((5, 0, 0), frozenset({0, 1})) == 0
    assert location_score((5, 0), frozenset()) == 0


def test_partial_match_keeps_content_but_loses_location(make_corpus) -> None:
    corpus = make_corpus({"both": ["x", "alpha", "beta"], "half": ["alpha", "alpha"]})

    results = {result.url: result for result in QueryScorer(corpus).search("alpha beta")}

    assert results["half"].content_score == 1.0
    assert results["half"].location_score == 0.0
    assert results["both"].location_score == pytest.approx(0.8)
    assert results["both"].content_score == pytest.approx(1.0)


def test_normalized_scores_stay_in_unit_range(make_corpus) -> None:
    corpus = make_corpus(
        {"a": ["w", "w", "w"], "b": ["q", "w"], "c": ["q"], "d": ["w", "q", "w"]}
    )
    config = ScoringConfig(content_weight=1.0, location_weight=1.0, authority_weight=1.0)

    results = QueryScorer(corpus, config).search("w")

    assert {result.url for result in results} == {"a", "b", "d"}
    assert max(result.content_score for result in results) == 1.0
    assert all(0.0 <= result.content_score <= 1.0 for result in results)
    assert all(0.0 <= result.location_score <= 1.0 for result in results)


def test_total_is_weighted_sum(make_corpus) -> None:
    corpus = make_corpus({"a": ["k", "z"], "b": ["z", "k", "k"]})

    for result in QueryScorer(corpus).search("k"):
        assert result.total_score == pytest.approx(
            result.content_score + result.location_score + result.authority_score
        )
        # No links, so every page shares the top authority of 1.0.
        assert result.authority_score == pytest.approx(0.5)


def test_authority_breaks_content_ties(make_corpus) -> None:
    corpus = make_corpus(
        {"plain": ["topic"], "popular": ["topic"], "fan": ["other"]},
        links={"fan": ["/wiki/popular"]},
    )

    results = QueryScorer(corpus).search("topic")

    assert [result.url for result in results] == ["popular", "plain"]


def test_equal_totals_keep_corpus_order(make_corpus) -> None:
    corpus = make_corpus({"c": ["same"], "a": ["same"], "b": ["same"]})

    results = QueryScorer(corpus, ScoringConfig(max_workers=3)).search("same")

    assert [result.url for result in results] == ["c", "a", "b"]


def test_unknown_and_empty_queries_return_nothing(make_corpus) -> None:
    corpus = make_corpus({"a": ["alpha"]})
    scorer = QueryScorer(corpus)

    assert scorer.search("missing") == []
    assert scorer.search("") == []
    assert scorer.search("   ") == []


def test_query_is_case_sensitive(make_corpus) -> None:
    corpus = make_corpus({"a": ["Alpha"]})

    assert QueryScorer(corpus).search("alpha") == []
    assert [r.url for r in QueryScorer(corpus).search("Alpha")] == ["a"]


def test_limit_truncates_results(make_corpus) -> None:
    corpus = make_corpus({name: ["t"] for name in "abcde"})

    assert len(QueryScorer(corpus).search("t", limit=2)) == 2


def test_results_match_across_worker_counts(make_corpus) -> None:
    pages = {f"p{i}": ["n"] * (i % 4 + 1) + ["m"] * i for i in range(40)}
    corpus = make_corpus(pages)

    serial = QueryScorer(corpus, ScoringConfig(max_workers=1)).search("n m")
    parallel = QueryScorer(corpus, ScoringConfig(max_workers=8)).search("n m")

    assert serial == parallel
