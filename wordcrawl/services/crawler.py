import logging
import os
import time
from concurrent.futures import ThreadPoolExecutor, TimeoutError as FuturesTimeoutError
from datetime import datetime, timezone
from typing import Callable, List, Optional

from wordcrawl import config as env
from wordcrawl.domain.config import CrawlerConfig
from wordcrawl.domain.crawl_context import CrawlContext
from wordcrawl.domain.crawl_result import CrawlResult, PartialResult
from wordcrawl.domain.word_counts import top_words
from wordcrawl.exceptions import ConfigurationError
from wordcrawl.profiler import profiled
from wordcrawl.services.crawl_policy import CrawlPolicy
from wordcrawl.services.crawl_task import CrawlTask

logger = logging.getLogger(__name__)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class ParallelCrawler:
    """Crawls starting URLs on a bounded thread pool and reports popular words.

    Each `crawl()` call gets its own deadline, visited tracker and pool; the
    crawler object itself holds no per-crawl state and can be reused.
    """

    def __init__(
        self,
        page_parser,
        clock: Optional[Callable[[], datetime]] = None,
        grace_seconds: Optional[float] = None,
        crawl_policy: Optional[CrawlPolicy] = None,
    ):
        self.page_parser = page_parser
        self.clock = clock or utc_now
        self.grace_seconds = grace_seconds if grace_seconds is not None else env.grace_seconds()
        self.crawl_policy = crawl_policy or CrawlPolicy()

    def get_max_parallelism(self) -> int:
        return os.cpu_count() or 1

    @profiled
    def crawl(self, starting_urls: List[str], config: CrawlerConfig) -> CrawlResult:
        """Crawl from every URL in `starting_urls` using `config`.

        Raises `ConfigurationError` before any work starts if the inputs are
        unusable; otherwise always returns a `CrawlResult`.
        """
        if not isinstance(config, CrawlerConfig):
            raise ConfigurationError("config", "a CrawlerConfig is required for crawl")
        if starting_urls is None or isinstance(starting_urls, str):
            raise ConfigurationError("startPages", "must be a list of URLs")
        starting_urls = list(starting_urls)

        deadline = self.clock() + config.timeout
        workers = min(config.parallelism, self.get_max_parallelism())
        logger.info(
            "Starting crawl of %d url(s): max_depth=%s deadline=%s workers=%d",
            len(starting_urls), config.max_depth, deadline.isoformat(), workers,
        )

        executor = ThreadPoolExecutor(max_workers=workers, thread_name_prefix="wordcrawl")
        context = CrawlContext(
            deadline=deadline,
            clock=self.clock,
            ignored_urls=config.ignored_urls,
            parse=self.page_parser.parse,
            executor=executor,
        )
        try:
            total = self._run_roots(starting_urls, config, context)
        finally:
            executor.shutdown(wait=False, cancel_futures=True)

        self._report_failures(total)
        result = CrawlResult(
            word_counts=top_words(total.word_counts, config.popular_word_count),
            urls_visited=total.urls_visited,
        )
        logger.info(
            "Crawl finished: %d page(s) visited, %d distinct word(s), %d failure(s)",
            result.urls_visited, len(total.word_counts), len(total.failures),
        )
        return result

    def _run_roots(self, starting_urls: List[str], config: CrawlerConfig, context: CrawlContext) -> PartialResult:
        # Safety net for a hung parser: wait until the deadline plus a grace period.
        remaining = max(0.0, (context.deadline - self.clock()).total_seconds())
        wait_until = time.monotonic() + remaining + self.grace_seconds

        futures = []
        for url in starting_urls:
            task = CrawlTask(url, config.max_depth, context, self.crawl_policy)
            futures.append((url, context.executor.submit(task.compute)))

        total = PartialResult()
        for url, future in futures:
            try:
                total.merge(future.result(timeout=max(0.0, wait_until - time.monotonic())))
            except FuturesTimeoutError:
                logger.warning(
                    "Abandoning crawl from %s: still running %.0fs after the deadline",
                    url, self.grace_seconds,
                )
        return total

    def _report_failures(self, total: PartialResult) -> None:
        if not total.failures:
            return
        logger.warning("%d crawl task(s) failed unexpectedly", len(total.failures))
        for url, error in total.failures:
            logger.error("Worker failure at %s: %r", url, error)
