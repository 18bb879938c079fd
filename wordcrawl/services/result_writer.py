import json
from typing import TextIO

from wordcrawl.domain.crawl_result import CrawlResult


class CrawlResultWriter:
    """Serializes a CrawlResult as JSON: `{"wordCounts": {...}, "urlsVisited": N}`."""

    def __init__(self, result: CrawlResult):
        self.result = result

    def to_dict(self) -> dict:
        return {
            "wordCounts": dict(self.result.word_counts),
            "urlsVisited": self.result.urls_visited,
        }

    def write(self, stream: TextIO) -> None:
        json.dump(self.to_dict(), stream, indent=2)
        stream.write("\n")

    def write_path(self, path: str) -> None:
        """Append the result to `path`, creating the file if needed."""
        with open(path, "a", encoding="utf-8") as f:
            self.write(f)
