import logging
import time
from typing import Callable, Optional

from wordcrawl.services.url_filter import UrlFilter

logger = logging.getLogger(__name__)


class CrawlPolicy:
    """Encapsulates crawl decision rules: depth limits, the deadline, and URL exclusions.

    Separates policy decisions from crawl orchestration logic.
    """

    def __init__(self, url_filter: Optional[UrlFilter] = None, clock: Optional[Callable[[], float]] = None):
        self.url_filter = url_filter or UrlFilter()
        self.clock = clock or time.monotonic

    def should_skip_due_to_depth(self, remaining_depth: int) -> bool:
        """Check if URL should be skipped because no depth budget is left."""
        if remaining_depth <= 0:
            logger.debug("Skipping (max depth reached) at remaining depth %s", remaining_depth)
            return True
        return False

    def should_skip_due_to_deadline(self, url: str, deadline: float) -> bool:
        """Check if the crawl deadline has been reached."""
        if self.clock() >= deadline:
            logger.debug("Skipping (deadline reached) %s", url)
            return True
        return False

    def should_skip_due_to_filter(self, url: str) -> bool:
        """Check if URL matches one of the ignored URL patterns."""
        if self.url_filter.is_excluded(url):
            logger.debug("Skipping (ignored url) %s", url)
            return True
        return False
