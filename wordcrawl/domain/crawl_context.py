from datetime import datetime
from typing import Callable, List, Pattern

from wordcrawl.domain.parse_result import ParseResult
from wordcrawl.domain.visited_tracker import VisitedTracker


class CrawlContext:
    """State shared by all crawl tasks of one `crawl()` call.

    Everything here is read-only for the tasks except `visited`, which is
    only touched through `VisitedTracker.try_visit`.
    """

    def __init__(
        self,
        *,
        deadline: datetime,
        clock: Callable[[], datetime],
        ignored_urls: List[Pattern],
        parse: Callable[[str], ParseResult],
        executor,
        visited: VisitedTracker = None,
    ):
        self.deadline = deadline
        self.clock = clock
        self.ignored_urls = ignored_urls
        self.parse = parse
        self.executor = executor
        self.visited = visited if visited is not None else VisitedTracker()

    def deadline_passed(self) -> bool:
        return self.clock() > self.deadline
