import argparse
import logging
import sys

from wordcrawl import config as env
from wordcrawl.container import Container
from wordcrawl.exceptions import ConfigurationError
from wordcrawl.services.result_writer import CrawlResultWriter

logger = logging.getLogger("wordcrawl")


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Crawl web pages and report the most popular words.")
    parser.add_argument("config", help="path to a YAML or JSON crawl configuration file")
    return parser.parse_args(argv)


def main(argv=None, container: Container = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=env.log_level())
    container = container or Container()

    try:
        cfg = container.config_service().load(args.config)
    except ConfigurationError as e:
        logger.error("Could not load configuration: %s", e)
        return 2

    profiler = container.profiler()
    page_parser = container.page_parser(ignored_words=cfg.ignored_words)
    crawler = profiler.wrap(container.crawler(page_parser=page_parser))

    try:
        result = crawler.crawl(cfg.start_pages, cfg)
    except ConfigurationError as e:
        logger.error("Invalid configuration: %s", e)
        return 2

    writer = CrawlResultWriter(result)
    if cfg.result_path:
        writer.write(cfg.result_path)
    else:
        writer.write_to(sys.stdout)
        sys.stdout.flush()

    if cfg.profile_output_path:
        profiler.write_data(cfg.profile_output_path)
    else:
        profiler.write_data_to(sys.stdout)
        sys.stdout.flush()
    return 0


if __name__ == '__main__':
    sys.exit(main())
