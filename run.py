import argparse
import logging
import sys
from typing import Optional, Sequence

from dependency_injector import providers

from wordcrawl import config as env
from wordcrawl.container import Container
from wordcrawl.exceptions import ConfigError
from wordcrawl.services.result_writer import CrawlResultWriter

logger = logging.getLogger(__name__)


def _setup_logging() -> None:
    logging.basicConfig(
        level=env.log_level(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    logging.getLogger("urllib3").setLevel(logging.WARNING)


def main(argv: Optional[Sequence[str]] = None, container: Optional[Container] = None) -> int:
    """Crawl the pages named in a config file and report the most popular words.

    Accepts an optional container for dependency injection (useful for testing).
    """
    parser = argparse.ArgumentParser(description="Crawl web pages and count the most popular words.")
    parser.add_argument("config", help="path to a JSON or YAML crawler configuration file")
    args = parser.parse_args(argv)

    _setup_logging()

    if container is None:
        container = Container()

    try:
        crawler_config = container.config_file_service().load(args.config)
    except ConfigError as e:
        logger.error("Invalid configuration: %s", e)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    container.crawler_configuration.override(providers.Object(crawler_config))
    profiler = container.profiler()
    crawler = profiler.wrap(container.crawler_factory().get(crawler_config.implementation_override))

    result = crawler.crawl(list(crawler_config.start_pages))

    writer = CrawlResultWriter(result)
    try:
        if crawler_config.result_path:
            writer.write_path(crawler_config.result_path)
            logger.info("Wrote crawl result to %s", crawler_config.result_path)
        else:
            writer.write(sys.stdout)

        if crawler_config.profile_output_path:
            profiler.write_data_path(crawler_config.profile_output_path)
            logger.info("Wrote profile data to %s", crawler_config.profile_output_path)
        else:
            profiler.write_data(sys.stdout)
    except OSError as e:
        logger.error("Could not write output: %s", e)
        print(f"Error: could not write output: {e}", file=sys.stderr)
        return 2
    return 0


if __name__ == '__main__':
    sys.exit(main())
