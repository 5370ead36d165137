"""Domain objects for WordCrawl - explicit re-exports to satisfy linters."""
from .config import CrawlerConfig as CrawlerConfig
from .crawl_context import CrawlContext as CrawlContext
from .crawl_result import CrawlResult as CrawlResult
from .crawl_result import PartialResult as PartialResult
from .parse_result import ParseResult as ParseResult
from .visited_tracker import VisitedTracker as VisitedTracker

__all__ = ["CrawlerConfig", "CrawlContext", "CrawlResult", "PartialResult", "ParseResult", "VisitedTracker"]
