from wordcrawl.domain.crawl_result import CrawlResult, PartialResult


def test_add_page_counts_one_page():
    partial = PartialResult()
    partial.add_page({"a": 2})
    partial.add_page({"a": 1, "b": 1})
    assert partial.urls_visited == 2
    assert partial.word_counts == {"a": 3, "b": 1}


def test_merge_combines_counts_pages_and_failures():
    err = RuntimeError("x")
    left = PartialResult(word_counts={"a": 1}, urls_visited=1)
    right = PartialResult(word_counts={"a": 2, "b": 1}, urls_visited=2, failures=[("http://x.com", err)])

    assert left.merge(right) is left
    assert left.word_counts == {"a": 3, "b": 1}
    assert left.urls_visited == 3
    assert left.failures == [("http://x.com", err)]


def test_failed_partial_has_no_pages():
    partial = PartialResult.failed("http://x.com", ValueError("bad"))
    assert partial.urls_visited == 0
    assert partial.word_counts == {}
    assert partial.failures[0][0] == "http://x.com"


def test_crawl_result_fields():
    result = CrawlResult(word_counts={"a": 1}, urls_visited=3)
    assert result.word_counts == {"a": 1}
    assert result.urls_visited == 3
