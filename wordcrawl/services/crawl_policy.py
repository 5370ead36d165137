import logging

from wordcrawl.domain.crawl_context import CrawlContext

logger = logging.getLogger(__name__)


class CrawlPolicy:
    """Encapsulates crawl decision rules: depth budget, deadline and ignored URLs.

    Separates policy decisions from the traversal in `CrawlTask`.
    """

    def should_skip_due_to_depth(self, url: str, depth: int) -> bool:
        """Check if the depth budget for this branch is used up."""
        if depth <= 0:
            logger.debug("Skipping (max depth reached) %s", url)
            return True
        return False

    def should_skip_due_to_deadline(self, url: str, context: CrawlContext) -> bool:
        """Check if the crawl deadline has already passed."""
        if context.deadline_passed():
            logger.debug("Skipping (deadline passed) %s", url)
            return True
        return False

    def should_skip_due_to_ignore(self, url: str, context: CrawlContext) -> bool:
        """Check if the URL matches one of the configured ignore patterns."""
        for pattern in context.ignored_urls:
            if pattern.fullmatch(url):
                logger.debug("Skipping (ignored by %s) %s", pattern.pattern, url)
                return True
        return False
