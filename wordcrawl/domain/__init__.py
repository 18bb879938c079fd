"""Domain objects for wordcrawl - explicit re-exports to satisfy linters."""
from .config import CrawlerConfiguration as CrawlerConfiguration
from .crawl_result import CrawlResult as CrawlResult
from .crawl_state import CrawlState as CrawlState
from .page_parse_result import PageParseResult as PageParseResult
from .visited_tracker import VisitedTracker as VisitedTracker

__all__ = ["CrawlerConfiguration", "CrawlResult", "CrawlState", "PageParseResult", "VisitedTracker"]
