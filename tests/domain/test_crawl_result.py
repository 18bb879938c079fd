import pytest

from wordcrawl.domain.crawl_result import CrawlResult


def test_build_keeps_ranked_order():
    result = CrawlResult.build([("c", 5), ("bb", 3), ("a", 3)], urls_visited=4)
    assert list(result.word_counts.items()) == [("c", 5), ("bb", 3), ("a", 3)]
    assert result.urls_visited == 4


def test_word_counts_are_read_only():
    result = CrawlResult.build([("a", 1)], urls_visited=1)
    with pytest.raises(TypeError):
        result.word_counts["a"] = 2


def test_empty_result_carries_visited_count():
    result = CrawlResult.empty(urls_visited=3)
    assert dict(result.word_counts) == {}
    assert result.urls_visited == 3
