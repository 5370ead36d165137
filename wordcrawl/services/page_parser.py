import logging
import re
from collections import Counter
from typing import Callable, List, Optional, Pattern
from urllib.parse import urldefrag, urljoin, urlparse

from bs4 import BeautifulSoup

from wordcrawl.domain.parse_result import ParseResult
from wordcrawl.exceptions import HttpFetchError, PageParseError
from wordcrawl.services.http_service import HttpService

logger = logging.getLogger(__name__)

_NON_LETTERS = re.compile(r"[^a-zA-Z]")
_INVISIBLE_TAGS = ["script", "style", "noscript"]
_HTML_TYPES = ("text/html", "application/xhtml+xml")


class PageParser:
    """Fetches a page and turns it into outbound links and word counts.

    The crawl core only calls `parse(url)`; any object with that method can
    be used in its place.
    """

    def __init__(
        self,
        http_service: HttpService,
        ignored_words: Optional[List[Pattern]] = None,
        soup_factory: Optional[Callable[[str], BeautifulSoup]] = None,
    ):
        self.http_service = http_service
        self.ignored_words = list(ignored_words or [])
        self._soup_factory = soup_factory or (lambda html: BeautifulSoup(html, "html.parser"))

    def parse(self, url: str) -> ParseResult:
        try:
            response = self.http_service.fetch(url)
        except HttpFetchError as e:
            raise PageParseError(url, "fetch failed", e) from e
        logger.debug("Fetched %s -> status %s", url, response.status_code)

        sc = int(response.status_code)
        if sc < 200 or sc >= 300:
            raise PageParseError(url, f"non-success status {response.status_code}")
        if not self.is_html(response.content_type):
            raise PageParseError(url, f"unsupported content type {response.content_type!r}")

        soup = self._soup_factory(response.text or "")
        links = self.extract_links(url, soup)
        for tag in soup.find_all(_INVISIBLE_TAGS):
            tag.decompose()
        word_counts = self.count_words(soup.get_text(separator=" "))
        return ParseResult(links=links, word_counts=word_counts)

    @staticmethod
    def is_html(content_type: Optional[str]) -> bool:
        """A missing Content-Type is treated as HTML."""
        if not content_type:
            return True
        return content_type.split(";", 1)[0].strip().lower() in _HTML_TYPES

    def extract_links(self, base_url: str, soup: BeautifulSoup) -> List[str]:
        links = []
        for a in soup.find_all("a", href=True):
            abs_url, _ = urldefrag(urljoin(base_url, a.get("href")))
            if urlparse(abs_url).scheme in ("http", "https"):
                links.append(abs_url)
        return links

    def count_words(self, text: str) -> dict:
        counts = Counter()
        for token in text.split():
            word = _NON_LETTERS.sub("", token).lower()
            if not word or self._is_ignored(word):
                continue
            counts[word] += 1
        return dict(counts)

    def _is_ignored(self, word: str) -> bool:
        return any(p.fullmatch(word) for p in self.ignored_words)
