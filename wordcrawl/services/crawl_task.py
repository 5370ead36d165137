import logging
from concurrent.futures import Future
from typing import List, Optional, Tuple

from wordcrawl.domain.crawl_context import CrawlContext
from wordcrawl.domain.crawl_result import PartialResult
from wordcrawl.exceptions import PageParseError
from wordcrawl.services.crawl_policy import CrawlPolicy

logger = logging.getLogger(__name__)

# (url, remaining depth)
Frontier = List[Tuple[str, int]]


class CrawlTask:
    """Crawl one URL with a remaining depth budget and return its subtree's result.

    The subtree is walked with an explicit frontier rather than recursion, so
    the link depth is bounded by `max_depth` and not by the interpreter stack.
    For each parsed page the first link stays on this thread and the others
    are forked onto the shared executor as new tasks. Forked tasks are joined
    before `compute()` returns, so the `PartialResult` always covers the whole
    subtree.
    """

    def __init__(self, url: str, depth: int, context: CrawlContext, policy: Optional[CrawlPolicy] = None):
        self.url = url
        self.depth = depth
        self.context = context
        self.policy = policy or CrawlPolicy()

    def compute(self) -> PartialResult:
        """Run the task. Never raises for an `Exception`: a failing page contributes nothing."""
        result = PartialResult()
        frontier: Frontier = [(self.url, self.depth)]
        forked: List[Tuple[str, int, Optional[Future]]] = []

        while frontier or forked:
            if not frontier:
                self._join(forked.pop(), frontier, result)
                continue
            url, depth = frontier.pop()
            links = self._visit(url, depth, result)
            for i, link in enumerate(links):
                if i == 0:
                    frontier.append((link, depth - 1))
                else:
                    forked.append((link, depth - 1, self._fork(link, depth - 1)))
        return result

    def _visit(self, url: str, depth: int, result: PartialResult) -> List[str]:
        """Crawl a single page into `result` and return the links to follow."""
        try:
            return self._visit_page(url, depth, result)
        except Exception as e:
            logger.exception("Worker failure while crawling %s", url)
            result.merge(PartialResult.failed(url, e))
            return []

    def _visit_page(self, url: str, depth: int, result: PartialResult) -> List[str]:
        if self.policy.should_skip_due_to_depth(url, depth):
            return []
        if self.policy.should_skip_due_to_deadline(url, self.context):
            return []
        if self.policy.should_skip_due_to_ignore(url, self.context):
            return []
        if not self.context.visited.try_visit(url):
            logger.debug("Skipping (visited) %s", url)
            return []

        try:
            page = self.context.parse(url)
        except PageParseError as e:
            # stays marked visited so sibling branches don't retry it
            logger.warning("Parse failed for %s: %s", url, e)
            return []

        logger.info("Parsed %s -> %d words, %d links", url, len(page.word_counts), len(page.links))
        result.add_page(page.word_counts)
        return list(page.links)

    def _join(self, entry: Tuple[str, int, Optional[Future]], frontier: Frontier, result: PartialResult) -> None:
        """Collect a forked child.

        A child that no worker has picked up yet is cancelled and pushed back
        onto this task's frontier, so a full pool of waiting parents can never
        deadlock. Waits only ever target a child that is already running.
        """
        url, depth, future = entry
        if future is None or future.cancel():
            frontier.append((url, depth))
        else:
            result.merge(future.result())

    def _fork(self, url: str, depth: int) -> Optional[Future]:
        child = CrawlTask(url, depth, self.context, self.policy)
        try:
            return self.context.executor.submit(child.compute)
        except RuntimeError:
            # executor already shut down; the link stays on this task's frontier
            return None
