import logging
import os
import time
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Iterable, List, Optional

from wordcrawl.domain.crawl_result import CrawlResult
from wordcrawl.domain.crawl_state import CrawlState
from wordcrawl.profiler import profiled
from wordcrawl.services.crawl_policy import CrawlPolicy
from wordcrawl.services.crawl_task import CrawlTask
from wordcrawl.services.protocols import PageParserProvider
from wordcrawl.services.url_filter import UrlFilter
from wordcrawl.services.word_ranker import rank

logger = logging.getLogger(__name__)


def max_parallelism() -> int:
    return os.cpu_count() or 1


class CrawlExecutor:
    """Runs a crawl on a pool of worker threads.

    This class owns the crawl control-flow (deadline, shared state, one root
    task per seed URL, waiting for completion, ranking). It does NOT
    construct its collaborators; those come from the DI layer.
    """

    def __init__(
        self,
        *,
        parser_factory: PageParserProvider,
        timeout_seconds: float,
        max_depth: int,
        popular_word_count: int,
        parallelism: Optional[int] = None,
        ignored_urls: Iterable = (),
        clock: Optional[Callable[[], float]] = None,
    ):
        if max_depth < 0:
            raise ValueError("max_depth must be non-negative")
        if popular_word_count < 0:
            raise ValueError("popular_word_count must be non-negative")
        self.parser_factory = parser_factory
        self.timeout_seconds = float(timeout_seconds)
        self.max_depth = int(max_depth)
        self.popular_word_count = int(popular_word_count)
        self.clock = clock or time.monotonic
        self.policy = CrawlPolicy(UrlFilter(ignored_urls), self.clock)
        self.pool_size = max(1, min(parallelism or max_parallelism(), max_parallelism()))

    @profiled
    def crawl(self, seed_urls: List[str]) -> CrawlResult:
        deadline = self.clock() + self.timeout_seconds
        state = CrawlState()
        seeds = list(seed_urls or [])
        logger.info(
            "Starting crawl of %s seed(s): depth=%s timeout=%ss workers=%s",
            len(seeds), self.max_depth, self.timeout_seconds, self.pool_size,
        )
        if seeds:
            self._run(seeds, deadline, state)

        result = self._build_result(state)
        logger.info("Crawl finished: %s urls visited, %s popular words", result.urls_visited, len(result.word_counts))
        return result

    def _root_task(self, url: str, deadline: float, state: CrawlState, pool=None) -> CrawlTask:
        return CrawlTask(
            url,
            self.max_depth,
            deadline,
            state=state,
            policy=self.policy,
            parser_factory=self.parser_factory,
            pool=pool,
        )

    def _run(self, seeds: List[str], deadline: float, state: CrawlState) -> None:
        with ThreadPoolExecutor(max_workers=self.pool_size, thread_name_prefix="wordcrawl") as pool:
            futures = [pool.submit(self._root_task(url, deadline, state, pool).compute) for url in seeds]
            for future in futures:
                future.result()

    def _build_result(self, state: CrawlState) -> CrawlResult:
        counts = state.word_counts()
        if not counts:
            return CrawlResult.empty(state.urls_visited)
        return CrawlResult.build(rank(counts, self.popular_word_count), state.urls_visited)
