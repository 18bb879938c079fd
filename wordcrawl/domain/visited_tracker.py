import threading
from typing import Set


class VisitedTracker:
    """
    Tracks which URLs have been visited during a crawl.

    Safe to share between threads. `mark` is the only way in: it tests and
    inserts under a single lock acquisition, so when several tasks discover
    the same URL at once exactly one of them sees `True`.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._visited: Set[str] = set()

    def mark(self, url: str) -> bool:
        """Mark a URL as visited. Returns True only if it was not visited before."""
        with self._lock:
            if url in self._visited:
                return False
            self._visited.add(url)
            return True

    def is_visited(self, url: str) -> bool:
        """Check if a URL has been visited."""
        with self._lock:
            return url in self._visited

    def __len__(self) -> int:
        with self._lock:
            return len(self._visited)
