import logging
from typing import Optional

from wordcrawl.domain.config import CrawlerConfig
from wordcrawl.exceptions import ConfigurationError
from wordcrawl.services.config_file_store import ConfigFileStore
from wordcrawl.services.crawler_config_parser import CrawlerConfigParser

logger = logging.getLogger(__name__)


class ConfigService:
    """Loads a crawl configuration file and turns it into a validated `CrawlerConfig`."""

    def __init__(self, store: Optional[ConfigFileStore] = None, parser: Optional[CrawlerConfigParser] = None):
        self.store = store or ConfigFileStore()
        self.parser = parser or CrawlerConfigParser()

    def load(self, config_path: str) -> CrawlerConfig:
        data = self.store.load_yaml_dict(config_path)
        if data is None:
            raise ConfigurationError(config_path, "missing, unreadable or not a mapping")
        cfg = self.parser.parse(data=data)
        logger.info("Loaded config %s: %r", config_path, cfg)
        return cfg
