import logging
from concurrent.futures import Executor, Future
from typing import List, Optional, Tuple

from wordcrawl.domain.crawl_state import CrawlState
from wordcrawl.domain.page_parse_result import PageParseResult
from wordcrawl.exceptions import PageParseError
from wordcrawl.services.crawl_policy import CrawlPolicy
from wordcrawl.services.protocols import PageParserProvider

logger = logging.getLogger(__name__)


class CrawlTask:
    """Crawls one URL and, recursively, everything reachable from it.

    A task forks one child per discovered link and does not return until all
    of its children have returned, so running a root task is a single
    blocking call covering its whole subtree. Tasks talk to each other only
    through the shared `CrawlState`.

    Children run on the calling thread are drained from a work-list rather
    than by nested calls, so the depth of a link chain is not bounded by the
    interpreter's recursion limit.
    """

    def __init__(
        self,
        url: str,
        remaining_depth: int,
        deadline: float,
        *,
        state: CrawlState,
        policy: CrawlPolicy,
        parser_factory: PageParserProvider,
        pool: Optional[Executor] = None,
    ):
        self.url = url
        self.remaining_depth = remaining_depth
        self.deadline = deadline
        self.state = state
        self.policy = policy
        self.parser_factory = parser_factory
        self.pool = pool

    def child(self, link: str) -> "CrawlTask":
        return CrawlTask(
            link,
            self.remaining_depth - 1,
            self.deadline,
            state=self.state,
            policy=self.policy,
            parser_factory=self.parser_factory,
            pool=self.pool,
        )

    def compute(self) -> None:
        # (task, future) pairs, last one runs next. The future is None for a
        # task that was never forked.
        pending: List[Tuple[CrawlTask, Optional[Future]]] = [(self, None)]
        running: List[Future] = []
        while pending:
            task, future = pending.pop()
            # A forked child no worker has picked up yet is taken back and
            # run here, so this thread only ever blocks on running work.
            if future is not None and not future.cancel():
                running.append(future)
                continue
            pending.extend(reversed(task._fork(task._visit())))
        for future in running:
            future.result()

    def _visit(self) -> List["CrawlTask"]:
        """Parse this task's page and return the child tasks for its links."""
        if self.policy.should_skip_due_to_depth(self.remaining_depth):
            return []
        if self.policy.should_skip_due_to_deadline(self.url, self.deadline):
            return []
        if self.policy.should_skip_due_to_filter(self.url):
            return []
        if not self.state.mark_visited(self.url):
            logger.debug("Skipping (visited) %s", self.url)
            return []

        result = self._parse()
        if result is None:
            return []

        self.state.merge_word_counts(result.word_counts)
        logger.info("Parsed %s -> %s distinct words, %s links", self.url, len(result.word_counts), len(result.links))
        return [self.child(link) for link in result.links]

    def _parse(self) -> Optional[PageParseResult]:
        try:
            return self.parser_factory.get(self.url).parse()
        except PageParseError as e:
            logger.warning("Parse failed for %s: %s", self.url, e)
        except Exception as e:
            logger.error("Parse error for %s: %s", self.url, e, exc_info=True)
        return None

    def _fork(self, children: List["CrawlTask"]) -> List[Tuple["CrawlTask", Optional[Future]]]:
        if self.pool is None:
            return [(child, None) for child in children]
        return [(child, self.pool.submit(child.compute)) for child in children]
