"""
Command line entry point

    pagepatrol [--validate-og-images] [--validate-heading-tags] [--take-screenshots] URL...
"""

import argparse
import asyncio
import logging
from typing import List, Optional
from .config import CrawlConfig
from .crawler import CrawlerBuilder
from .monitoring import LogManager
from .storage import ResultCategory, ResultLog
from .utils import formatted_timestamp

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pagepatrol",
        description="Crawl a site from seed URLs and validate every page found."
    )
    parser.add_argument("urls", nargs="+", metavar="URL", help="Seed URL(s)")
    parser.add_argument("--validate-og-images", action="store_true",
                        help="Validate the og:image of every page")
    parser.add_argument("--validate-heading-tags", action="store_true",
                        help="Log h1..h5 presence for every page")
    parser.add_argument("--take-screenshots", action="store_true",
                        help="Save a full-page WebP screenshot of every page")
    return parser


def config_from_args(args: argparse.Namespace) -> CrawlConfig:
    return CrawlConfig(
        start_urls=list(args.urls),
        validate_og_images=args.validate_og_images,
        validate_heading_tags=args.validate_heading_tags,
        take_screenshots=args.take_screenshots
    )


async def run(config: CrawlConfig, session=None) -> int:
    """Run one crawl and return the process exit code

    The completion timestamp is always written to <log_root>/complete;
    a fatal failure is also written to <log_root>/error.
    """
    log_manager = None
    exit_code = 0

    try:
        crawler = CrawlerBuilder.from_config(config).with_session(session).build()
        log_manager = LogManager(crawler.run_dir, config.log_level)
        await crawler.crawl()
    except Exception as e:
        exit_code = 1
        logger.exception(f"Run failed: {e}")
        error_log = ResultLog(config.log_root / "error")
        await error_log.write(ResultCategory.ERROR, f"Run failed: {e}")
    finally:
        finished_at = formatted_timestamp(config.timezone)
        complete_log = ResultLog(config.log_root / "complete")
        await complete_log.write(ResultCategory.COMPLETE, f"Run finished at {finished_at}")
        logger.info(f"Run finished at {finished_at}")
        if log_manager:
            log_manager.close()

    return exit_code


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    return asyncio.run(run(config_from_args(args)))
