import re
from datetime import timedelta

import pytest

from wordcrawl.domain.config import CrawlerConfig
from wordcrawl.exceptions import ConfigurationError


def test_defaults():
    cfg = CrawlerConfig()
    assert cfg.start_pages == []
    assert cfg.max_depth == 0
    assert cfg.timeout == timedelta(seconds=1)
    assert cfg.popular_word_count == 0
    assert cfg.parallelism >= 1


def test_patterns_are_compiled():
    cfg = CrawlerConfig(ignored_urls=[r"http://x\.com/.*"], ignored_words=[re.compile(r"^.{1,3}$")])
    assert all(isinstance(p, re.Pattern) for p in cfg.ignored_urls + cfg.ignored_words)
    assert cfg.ignored_urls[0].fullmatch("http://x.com/a")


def test_numeric_timeout_is_seconds():
    assert CrawlerConfig(timeout=2.5).timeout == timedelta(seconds=2.5)


@pytest.mark.parametrize(
    "kwargs, field",
    [
        ({"max_depth": -1}, "maxDepth"),
        ({"max_depth": True}, "maxDepth"),
        ({"parallelism": 0}, "parallelism"),
        ({"popular_word_count": -3}, "popularWordCount"),
        ({"timeout": -1}, "timeoutSeconds"),
        ({"timeout": "10"}, "timeoutSeconds"),
        ({"ignored_urls": ["(unclosed"]}, "ignoredUrls"),
        ({"ignored_words": "abc"}, "ignoredWords"),
        ({"start_pages": "http://x.com"}, "startPages"),
    ],
)
def test_invalid_values_raise_configuration_error(kwargs, field):
    with pytest.raises(ConfigurationError) as exc:
        CrawlerConfig(**kwargs)
    assert exc.value.field == field
