import json
import logging
from typing import TextIO

from wordcrawl.domain.crawl_result import CrawlResult

logger = logging.getLogger(__name__)


class CrawlResultWriter:
    """Writes a `CrawlResult` as JSON.

    Field order is fixed: `wordCounts` (in popularity order) then `urlsVisited`.
    """

    def __init__(self, result: CrawlResult):
        if result is None:
            raise ValueError("result is required")
        self.result = result

    def to_dict(self) -> dict:
        return {
            "wordCounts": dict(self.result.word_counts),
            "urlsVisited": self.result.urls_visited,
        }

    def write(self, path: str) -> None:
        """Append the result to the file at `path`; existing content is kept."""
        with open(path, "a", encoding="utf-8") as f:
            self.write_to(f)
        logger.info("Wrote crawl result to %s", path)

    def write_to(self, writer: TextIO) -> None:
        """Write the result to an open text stream, leaving it open."""
        json.dump(self.to_dict(), writer, indent=2)
        writer.write("\n")
