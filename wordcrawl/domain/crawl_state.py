import threading
from typing import Dict, Mapping, Optional

from wordcrawl.domain.visited_tracker import VisitedTracker


class CrawlState:
    """Mutable state shared by every task of one crawl run.

    Holds the visited URLs and the running word totals. A new instance is
    created per run and dropped once the result has been built.
    """

    def __init__(self, visited_tracker: Optional[VisitedTracker] = None):
        self.visited = visited_tracker or VisitedTracker()
        self._counts_lock = threading.Lock()
        self._word_counts: Dict[str, int] = {}

    def mark_visited(self, url: str) -> bool:
        return self.visited.mark(url)

    def merge_word_counts(self, counts: Mapping[str, int]) -> None:
        """Add a page's word counts into the running totals.

        The whole page is merged inside one critical section, so concurrent
        merges never lose an increment and a reader never sees half a page.
        """
        if not counts:
            return
        with self._counts_lock:
            for word, count in counts.items():
                if count < 0:
                    raise ValueError(f"negative count {count} for word {word!r}")
                self._word_counts[word] = self._word_counts.get(word, 0) + count

    def word_counts(self) -> Dict[str, int]:
        """Return a copy of the current totals."""
        with self._counts_lock:
            return dict(self._word_counts)

    @property
    def urls_visited(self) -> int:
        return len(self.visited)
