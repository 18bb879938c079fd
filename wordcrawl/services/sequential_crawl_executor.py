from typing import List

from wordcrawl.domain.crawl_state import CrawlState
from wordcrawl.services.crawl_executor import CrawlExecutor


class SequentialCrawlExecutor(CrawlExecutor):
    """Same crawl as `CrawlExecutor`, done depth-first on the calling thread."""

    def _run(self, seeds: List[str], deadline: float, state: CrawlState) -> None:
        for url in seeds:
            self._root_task(url, deadline, state).compute()
