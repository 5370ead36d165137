from datetime import timedelta

import pytest

from wordcrawl.exceptions import ConfigurationError
from wordcrawl.services.crawler_config_parser import CrawlerConfigParser


def test_parse_camel_case_keys():
    parser = CrawlerConfigParser()
    cfg = parser.parse(data={
        "startPages": ["http://example.com", "http://example.com/foo"],
        "ignoredUrls": ["http://example\\.com/.*"],
        "ignoredWords": ["^.{1,3}$"],
        "parallelism": 4,
        "implementationOverride": "com.example.SequentialCrawler",
        "maxDepth": 10,
        "timeoutSeconds": 7,
        "popularWordCount": 3,
        "profileOutputPath": "profileData.txt",
        "resultPath": "crawlResults.json",
    })
    assert cfg.start_pages == ["http://example.com", "http://example.com/foo"]
    assert cfg.ignored_urls[0].pattern == "http://example\\.com/.*"
    assert cfg.ignored_words[0].pattern == "^.{1,3}$"
    assert cfg.parallelism == 4
    assert cfg.max_depth == 10
    assert cfg.timeout == timedelta(seconds=7)
    assert cfg.popular_word_count == 3
    assert cfg.profile_output_path == "profileData.txt"
    assert cfg.result_path == "crawlResults.json"


def test_parse_snake_case_aliases():
    cfg = CrawlerConfigParser().parse(data={"start_pages": ["http://a.com"], "max_depth": 2, "timeout_seconds": 0.5})
    assert cfg.start_pages == ["http://a.com"]
    assert cfg.max_depth == 2
    assert cfg.timeout == timedelta(seconds=0.5)


def test_parse_defaults_and_empty_paths():
    cfg = CrawlerConfigParser().parse(data={"resultPath": "", "profileOutputPath": None})
    assert cfg.start_pages == []
    assert cfg.result_path is None
    assert cfg.profile_output_path is None


@pytest.mark.parametrize(
    "data",
    [
        {"startPages": "http://a.com"},
        {"ignoredUrls": "http://a.com"},
        {"maxDepth": -1},
        {"maxDepth": "3"},
        {"timeoutSeconds": "soon"},
        {"ignoredUrls": ["[bad"]},
        {"resultPath": 12},
    ],
)
def test_parse_rejects_invalid_values(data):
    with pytest.raises(ConfigurationError):
        CrawlerConfigParser().parse(data=data)


def test_parse_rejects_non_mapping():
    with pytest.raises(ConfigurationError):
        CrawlerConfigParser().parse(data=["not", "a", "mapping"])
