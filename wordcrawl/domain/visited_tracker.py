import threading
from typing import Set


class VisitedTracker:
    """
    Tracks which URLs have been visited during a single crawl.

    Shared by every crawl task of one `crawl()` call. The only mutating
    operation is `try_visit`, which checks and marks under one lock; there is
    no separate membership test.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._visited: Set[str] = set()

    def try_visit(self, url: str) -> bool:
        """Mark `url` as visited.

        Returns True only for the first caller; every later call for the same
        URL, from any thread, returns False.
        """
        with self._lock:
            if url in self._visited:
                return False
            self._visited.add(url)
            return True
