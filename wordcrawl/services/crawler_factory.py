from __future__ import annotations

from dataclasses import dataclass

from wordcrawl.services.protocols import Crawler


@dataclass(frozen=True)
class CrawlerFactory:
    parallel_crawler: Crawler
    sequential_crawler: Crawler

    def get(self, implementation: str | None = None) -> Crawler:
        """Pick a crawler by name; an empty name means the parallel one."""
        mode = (implementation or "").strip().lower()
        if mode in ("", "parallel"):
            return self.parallel_crawler
        if mode == "sequential":
            return self.sequential_crawler
        raise ValueError(f"Unknown implementation: {implementation!r}")
