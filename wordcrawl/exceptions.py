"""Custom exceptions for wordcrawl."""


class ConfigError(Exception):
    """Raised when a crawler configuration cannot be loaded or is invalid."""

    def __init__(self, config_path: str, reason: str):
        self.config_path = config_path
        self.reason = reason
        super().__init__(f"Config '{config_path}' {reason}")


class InvalidPatternError(ConfigError):
    """Raised when a URL or word pattern is not a valid regular expression."""

    def __init__(self, pattern: str, original: Exception, config_path: str = "<inline>"):
        self.pattern = pattern
        self.original = original
        super().__init__(config_path, f"has invalid pattern {pattern!r}: {original}")


class PageFetchError(Exception):
    """Raised when a page cannot be loaded due to network or filesystem errors."""

    def __init__(self, url: str, original: Exception):
        self.url = url
        self.original = original
        super().__init__(f"Page fetch failed for {url}: {original}")


class PageParseError(Exception):
    """Raised when a page cannot be turned into words and links."""

    def __init__(self, url: str, original: Exception):
        self.url = url
        self.original = original
        super().__init__(f"Page parse failed for {url}: {original}")


class NoProfiledMethodsError(ValueError):
    """Raised when asked to profile an object that declares no profiled operations."""

    def __init__(self, type_name: str):
        self.type_name = type_name
        super().__init__(f"{type_name} declares no profiled methods")
