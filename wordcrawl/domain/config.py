from __future__ import annotations

import os
import re
from dataclasses import dataclass, field
from datetime import timedelta
from typing import Iterable, Optional, Pattern, Union

from wordcrawl.exceptions import ConfigurationError


def _compile_patterns(field_name: str, patterns: Iterable[Union[str, Pattern]]) -> list[Pattern]:
    if isinstance(patterns, (str, bytes)):
        raise ConfigurationError(field_name, "must be a list of patterns")
    compiled = []
    for p in patterns:
        if isinstance(p, re.Pattern):
            compiled.append(p)
            continue
        if not isinstance(p, str):
            raise ConfigurationError(field_name, f"pattern {p!r} is not a string")
        try:
            compiled.append(re.compile(p))
        except re.error as e:
            raise ConfigurationError(field_name, f"malformed pattern {p!r}: {e}") from e
    return compiled


def _require_int(field_name: str, value, minimum: int) -> int:
    # bool is an int subclass but never a valid count
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigurationError(field_name, f"must be an integer, got {value!r}")
    if value < minimum:
        raise ConfigurationError(field_name, f"must be >= {minimum}, got {value}")
    return value


def _to_timeout(value) -> timedelta:
    if isinstance(value, timedelta):
        timeout = value
    elif isinstance(value, (int, float)) and not isinstance(value, bool):
        timeout = timedelta(seconds=value)
    else:
        raise ConfigurationError("timeoutSeconds", f"must be a number of seconds, got {value!r}")
    if timeout < timedelta(0):
        raise ConfigurationError("timeoutSeconds", "must not be negative")
    return timeout


@dataclass(frozen=True)
class CrawlerConfig:
    """Validated crawl settings.

    Patterns may be given as strings; they are compiled on construction and
    matched against the whole URL (or word). Any invalid value raises
    `ConfigurationError`, so a constructed config is always usable.
    """

    start_pages: list[str] = field(default_factory=list)
    ignored_urls: list[Pattern] = field(default_factory=list)
    ignored_words: list[Pattern] = field(default_factory=list)
    parallelism: int = field(default_factory=lambda: os.cpu_count() or 1)
    max_depth: int = 0
    timeout: timedelta = timedelta(seconds=1)
    popular_word_count: int = 0
    profile_output_path: Optional[str] = None
    result_path: Optional[str] = None

    def __post_init__(self):
        if isinstance(self.start_pages, str) or not all(isinstance(u, str) for u in self.start_pages):
            raise ConfigurationError("startPages", "must be a list of URL strings")
        # frozen dataclass: normalise through object.__setattr__
        object.__setattr__(self, "start_pages", list(self.start_pages))
        object.__setattr__(self, "ignored_urls", _compile_patterns("ignoredUrls", self.ignored_urls))
        object.__setattr__(self, "ignored_words", _compile_patterns("ignoredWords", self.ignored_words))
        object.__setattr__(self, "timeout", _to_timeout(self.timeout))
        _require_int("parallelism", self.parallelism, 1)
        _require_int("maxDepth", self.max_depth, 0)
        _require_int("popularWordCount", self.popular_word_count, 0)

    def __repr__(self):
        return (
            f"<CrawlerConfig start_pages={len(self.start_pages)} max_depth={self.max_depth} "
            f"timeout={self.timeout} parallelism={self.parallelism}>"
        )
