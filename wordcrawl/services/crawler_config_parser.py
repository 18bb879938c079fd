import os
from numbers import Real
from typing import Any, Optional

from wordcrawl.domain.config import CrawlerConfiguration
from wordcrawl.exceptions import ConfigError
from wordcrawl.utils.patterns import compile_patterns

IMPLEMENTATIONS = ("", "parallel", "sequential")


class CrawlerConfigParser:
    """Parse a config dict into a CrawlerConfiguration.

    Responsibility: schema/validation for config files. Keys follow the
    camelCase names used in the JSON files (`startPages`, `maxDepth`, ...).
    It does NOT perform filesystem IO.
    """

    def parse(self, *, data: dict, config_path: Optional[str] = None) -> CrawlerConfiguration:
        path = config_path or "<inline>"
        start_pages = self._string_list(data, "startPages", path)
        parallelism = self._number(data, "parallelism", None, path, integer=True)
        if parallelism is not None and parallelism < 1:
            raise ConfigError(path, "parallelism must be at least 1")

        implementation = data.get("implementationOverride") or ""
        if not isinstance(implementation, str) or implementation.strip().lower() not in IMPLEMENTATIONS:
            raise ConfigError(path, f"has unknown implementationOverride {implementation!r}")

        optional = {}
        if parallelism is not None:
            optional["parallelism"] = parallelism

        return CrawlerConfiguration(
            start_pages=tuple(start_pages),
            ignored_urls=compile_patterns(self._string_list(data, "ignoredUrls", path), path),
            ignored_words=compile_patterns(self._string_list(data, "ignoredWords", path), path),
            implementation_override=implementation.strip().lower(),
            max_depth=self._number(data, "maxDepth", 0, path, integer=True),
            timeout_seconds=float(self._number(data, "timeoutSeconds", 1, path)),
            popular_word_count=self._number(data, "popularWordCount", 0, path, integer=True),
            profile_output_path=self._string(data, "profileOutputPath", path),
            result_path=self._string(data, "resultPath", path),
            config_path=os.path.basename(config_path) if config_path else None,
            **optional,
        )

    @staticmethod
    def _string_list(data: dict, key: str, path: str) -> list:
        value = data.get(key)
        if value is None:
            return []
        if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
            raise ConfigError(path, f"{key} must be a list of strings")
        return value

    @staticmethod
    def _string(data: dict, key: str, path: str) -> str:
        value = data.get(key)
        if value is None:
            return ""
        if not isinstance(value, str):
            raise ConfigError(path, f"{key} must be a string")
        return value

    @staticmethod
    def _number(data: dict, key: str, default: Any, path: str, integer: bool = False):
        value = data.get(key)
        if value is None:
            return default
        if isinstance(value, bool) or not isinstance(value, Real):
            raise ConfigError(path, f"{key} must be a number")
        if integer and int(value) != value:
            raise ConfigError(path, f"{key} must be a whole number")
        if value < 0:
            raise ConfigError(path, f"{key} must not be negative")
        return int(value) if integer else value
