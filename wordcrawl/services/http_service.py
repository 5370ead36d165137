import logging
from typing import Callable

import requests

from wordcrawl.domain.http_response import HttpResponse
from wordcrawl.exceptions import HttpFetchError

logger = logging.getLogger(__name__)


class HttpService:
    """Fetches pages for the parser through a `requests.get`-compatible callable.

    Only transport failures are translated (into `HttpFetchError`); status and
    content-type policy belong to the caller.
    """

    def __init__(self, user_agent: str, http_client: Callable, timeout: int = 10):
        self.user_agent = user_agent
        self.timeout = timeout
        self.http_client = http_client

    def fetch(self, url: str) -> HttpResponse:
        try:
            resp = self.http_client(url, headers={"User-Agent": self.user_agent}, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            logger.debug("Transport error fetching %s: %r", url, e)
            raise HttpFetchError(url, e) from e

        headers = getattr(resp, "headers", None) or {}
        return HttpResponse(
            status_code=resp.status_code,
            text=resp.text,
            content_type=headers.get("Content-Type"),
        )
