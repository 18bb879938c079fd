"""Dependency injection container for the application."""
from dependency_injector import containers, providers
import requests

from wordcrawl import config as env
from wordcrawl.domain.config import CrawlerConfiguration
from wordcrawl.profiler import Profiler
from wordcrawl.services.config_file_service import ConfigFileService
from wordcrawl.services.crawl_executor import CrawlExecutor
from wordcrawl.services.crawler_factory import CrawlerFactory
from wordcrawl.services.page_loader import PageLoader
from wordcrawl.services.page_parser import PageParserFactory
from wordcrawl.services.sequential_crawl_executor import SequentialCrawlExecutor


# Environment variables used by the container (read via `wordcrawl.config` helpers).
#
# WORDCRAWL_USER_AGENT (str, default: "wordcrawl/0.1")
#   User-Agent header for outbound HTTP requests.
#
# WORDCRAWL_PARSE_TIMEOUT (int seconds, default: 10)
#   Timeout for a single page download.
ENV = {
    "USER_AGENT": env.user_agent(),
    "PARSE_TIMEOUT": env.parse_timeout_seconds(),
}


class Container(containers.DeclarativeContainer):
    """Dependency injection container for wordcrawl."""

    config = providers.Configuration(default=ENV)

    # Loaded per run from the config file given on the command line.
    crawler_configuration = providers.Dependency(instance_of=CrawlerConfiguration)

    config_file_service = providers.Singleton(ConfigFileService)

    profiler = providers.Singleton(Profiler)

    page_loader = providers.Singleton(
        PageLoader,
        user_agent=config.USER_AGENT.as_(str),
        http_client=providers.Object(requests.get),
        timeout=config.PARSE_TIMEOUT.as_(int),
    )

    parser_factory = providers.Singleton(
        PageParserFactory,
        loader=page_loader,
        ignored_words=crawler_configuration.provided.ignored_words,
        profiler=profiler,
    )

    parallel_crawler = providers.Factory(
        CrawlExecutor,
        parser_factory=parser_factory,
        timeout_seconds=crawler_configuration.provided.timeout_seconds,
        max_depth=crawler_configuration.provided.max_depth,
        popular_word_count=crawler_configuration.provided.popular_word_count,
        parallelism=crawler_configuration.provided.parallelism,
        ignored_urls=crawler_configuration.provided.ignored_urls,
    )

    sequential_crawler = providers.Factory(
        SequentialCrawlExecutor,
        parser_factory=parser_factory,
        timeout_seconds=crawler_configuration.provided.timeout_seconds,
        max_depth=crawler_configuration.provided.max_depth,
        popular_word_count=crawler_configuration.provided.popular_word_count,
        parallelism=crawler_configuration.provided.parallelism,
        ignored_urls=crawler_configuration.provided.ignored_urls,
    )

    crawler_factory = providers.Factory(
        CrawlerFactory,
        parallel_crawler=parallel_crawler,
        sequential_crawler=sequential_crawler,
    )
