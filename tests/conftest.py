import threading
from datetime import datetime, timedelta, timezone

import pytest

from wordcrawl.domain.parse_result import ParseResult
from wordcrawl.exceptions import PageParseError


class FakePageParser:
    """In-memory link graph: url -> (links, word_counts)."""

    def __init__(self, pages, failing=(), broken=(), on_parse=None):
        self.pages = pages
        self.failing = set(failing)
        self.broken = set(broken)
        self.on_parse = on_parse
        self.calls = []
        self._lock = threading.Lock()

    def parse(self, url):
        with self._lock:
            self.calls.append(url)
        if self.on_parse is not None:
            self.on_parse(url)
        if url in self.failing:
            raise PageParseError(url, "simulated failure")
        if url in self.broken:
            raise RuntimeError(f"bug while handling {url}")
        links, words = self.pages.get(url, ([], {}))
        return ParseResult(links=list(links), word_counts=dict(words))


class StepClock:
    """Returns `start` on the first call and `start + step` afterwards."""

    def __init__(self, start=None, step=timedelta(hours=1)):
        self.start = start or datetime(2024, 1, 1, tzinfo=timezone.utc)
        self.step = step
        self.calls = 0

    def __call__(self):
        self.calls += 1
        return self.start if self.calls == 1 else self.start + self.step


class ManualClock:
    def __init__(self, now=None):
        self.now = now or datetime(2024, 1, 1, tzinfo=timezone.utc)

    def __call__(self):
        return self.now

    def advance(self, delta):
        self.now += delta


@pytest.fixture
def make_parser():
    return FakePageParser


@pytest.fixture
def step_clock():
    return StepClock()


@pytest.fixture
def manual_clock():
    return ManualClock()
