"""Crawl result data models."""
from dataclasses import dataclass, field
from typing import Dict, List, Mapping, NamedTuple, Tuple

from wordcrawl.domain.word_counts import merge_word_counts


class CrawlResult(NamedTuple):
    """Final report of one `crawl()` call.

    `word_counts` is already pruned to the popular words, in popularity order.
    `urls_visited` is not pruned: it counts every page parsed during the crawl.
    """
    word_counts: Dict[str, int]
    urls_visited: int


@dataclass
class PartialResult:
    """Word counts and page count for the subtree rooted at one crawl task.

    Owned by the task that builds it until it is returned to the parent.
    `failures` carries (url, exception) pairs for unexpected worker errors so
    the orchestrator can report them once the crawl is over.
    """
    word_counts: Dict[str, int] = field(default_factory=dict)
    urls_visited: int = 0
    failures: List[Tuple[str, Exception]] = field(default_factory=list)

    @classmethod
    def failed(cls, url: str, error: Exception) -> "PartialResult":
        return cls(failures=[(url, error)])

    def add_page(self, word_counts: Mapping[str, int]) -> None:
        merge_word_counts(self.word_counts, word_counts)
        self.urls_visited += 1

    def merge(self, other: "PartialResult") -> "PartialResult":
        merge_word_counts(self.word_counts, other.word_counts)
        self.urls_visited += other.urls_visited
        self.failures.extend(other.failures)
        return self
