"""Dependency injection container for the application."""
from dependency_injector import containers, providers
import requests

from wordcrawl import config as env
from wordcrawl.profiler import Profiler
from wordcrawl.services.config_service import ConfigService
from wordcrawl.services.crawler import ParallelCrawler
from wordcrawl.services.http_service import HttpService
from wordcrawl.services.page_parser import PageParser


# Environment variables used by the container (read via `wordcrawl.config` helpers).
#
# USER_AGENT (str, default: "WordCrawl/0.1")
#   User-Agent header for outbound HTTP requests.
#
# HTTP_TIMEOUT (int seconds, default: 10)
#   Timeout for a single page fetch.
#
# WORDCRAWL_GRACE_SECONDS (float seconds, default: 100)
#   How long past the crawl deadline the orchestrator waits for in-flight
#   tasks before abandoning them.
ENV = {
    "USER_AGENT": env.user_agent(),
    "HTTP_TIMEOUT": env.http_timeout_seconds(),
    "WORDCRAWL_GRACE_SECONDS": env.grace_seconds(),
}


class Container(containers.DeclarativeContainer):
    """Dependency injection container for WordCrawl."""

    config = providers.Configuration(default=ENV)

    http_service = providers.Singleton(
        HttpService,
        user_agent=config.USER_AGENT.as_(str),
        http_client=providers.Object(requests.get),
        timeout=config.HTTP_TIMEOUT.as_(int),
    )

    config_service = providers.Singleton(ConfigService)

    profiler = providers.Singleton(Profiler)

    # ignored_words is supplied per crawl config at call time
    page_parser = providers.Factory(
        PageParser,
        http_service=http_service,
    )

    crawler = providers.Factory(
        ParallelCrawler,
        page_parser=page_parser,
        grace_seconds=config.WORDCRAWL_GRACE_SECONDS.as_(float),
    )
