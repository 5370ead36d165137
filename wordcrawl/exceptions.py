"""Custom exceptions for WordCrawl."""
from typing import Optional


class ConfigurationError(Exception):
    """Raised when a crawl configuration is missing or invalid.

    Always raised before any crawl task is started.
    """

    def __init__(self, field: str, reason: str):
        self.field = field
        self.reason = reason
        super().__init__(f"Invalid configuration '{field}': {reason}")


class HttpFetchError(Exception):
    """Raised when an HTTP fetch fails due to network/transport errors."""

    def __init__(self, url: str, original: Exception):
        self.url = url
        self.original = original
        super().__init__(f"HTTP fetch failed for {url}: {original}")


class PageParseError(Exception):
    """Raised when a page cannot be retrieved or parsed.

    Contained by the crawl task that requested the page; never escapes `crawl()`.
    """

    def __init__(self, url: str, reason: str, original: Optional[Exception] = None):
        self.url = url
        self.reason = reason
        self.original = original
        super().__init__(f"Could not parse {url}: {reason}")
