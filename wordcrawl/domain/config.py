from __future__ import annotations

import os
import re
from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class CrawlerConfiguration:
    """Settings for one crawl, as loaded from a JSON or YAML config file.

    Patterns are compiled at load time, so an instance is always usable
    as-is by the crawl engine.
    """

    start_pages: tuple[str, ...] = ()
    ignored_urls: tuple[re.Pattern[str], ...] = ()
    ignored_words: tuple[re.Pattern[str], ...] = ()
    parallelism: int = field(default_factory=lambda: os.cpu_count() or 1)
    implementation_override: str = ""
    max_depth: int = 0
    timeout_seconds: float = 1.0
    popular_word_count: int = 0
    profile_output_path: str = ""
    result_path: str = ""
    config_path: Optional[str] = None

    def __repr__(self):
        return (
            f"<CrawlerConfiguration path={self.config_path} pages={len(self.start_pages)} "
            f"depth={self.max_depth} timeout={self.timeout_seconds}s parallelism={self.parallelism}>"
        )
