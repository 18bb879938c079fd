import logging
from typing import Optional

from wordcrawl.domain.config import CrawlerConfiguration
from wordcrawl.services.config_file_store import ConfigFileStore
from wordcrawl.services.crawler_config_parser import CrawlerConfigParser

logger = logging.getLogger(__name__)


class ConfigFileService:
    """Loads a CrawlerConfiguration from disk: store for IO, parser for validation."""

    def __init__(self, store: Optional[ConfigFileStore] = None, parser: Optional[CrawlerConfigParser] = None):
        self.store = store or ConfigFileStore()
        self.parser = parser or CrawlerConfigParser()

    def load(self, config_path: str) -> CrawlerConfiguration:
        data = self.store.load_dict(config_path)
        cfg = self.parser.parse(data=data, config_path=config_path)
        logger.info("Loaded %r", cfg)
        return cfg
