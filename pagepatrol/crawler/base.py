"""
Base Crawler - Run controller driving the wave-based traversal
"""

import logging
from typing import List, Optional
from ..browser import BrowserSession
from ..config import CrawlConfig
from ..error_handler import ErrorHandler, FatalCrawlError
from ..features.base import CrawlerFeature
from ..frontier import CrawlFrontier
from ..monitoring import RunMetrics
from ..storage import ResultCategory, ResultLog
from ..utils import formatted_timestamp
from .page_processor import PageProcessor
from .result import PageOutcome

logger = logging.getLogger(__name__)


class BaseCrawler:
    """
    Seeds the frontier, processes every reachable URL exactly once and
    aggregates per-run counts. Optional checks are added as features.
    """

    def __init__(self, config: CrawlConfig, session=None):
        self.config = config
        self.start_urls = config.start_urls
        self.features: List[CrawlerFeature] = []

        self.session = session or BrowserSession(
            headless=config.headless,
            viewport_width=config.viewport_width,
            viewport_height=config.viewport_height,
            navigation_timeout_ms=config.navigation_timeout_ms
        )

        # Per-run output directory
        self.session_timestamp = formatted_timestamp(config.timezone)
        self.run_dir = config.log_root / self.session_timestamp
        self.result_log = ResultLog(self.run_dir)

        self.frontier = CrawlFrontier()
        self.error_handler = ErrorHandler()
        self.metrics = RunMetrics()
        self.processor = PageProcessor(self.session, self.result_log, config, self.features)

    def add_feature(self, feature: CrawlerFeature):
        """Add a feature to this crawler"""
        self.features.append(feature)
        return self

    async def crawl(self) -> RunMetrics:
        """Main crawling workflow

        Raises:
            FatalCrawlError: the browser could not start or the loop crashed
        """
        logger.info(f"Run started at {self.session_timestamp}")

        try:
            await self.session.start()
        except Exception as e:
            raise FatalCrawlError(f"Browser failed to start: {e}") from e

        try:
            for feature in self.features:
                await feature.initialize(self)

            for feature in self.features:
                await feature.before_crawl(self)

            await self._crawl_loop()

        except Exception as e:
            raise FatalCrawlError(f"Crawl aborted: {e}") from e

        finally:
            for feature in self.features:
                await feature.finalize(self)

            await self.session.close()
            self.metrics.finish()
            self.metrics.log_summary()

        return self.metrics

    async def _crawl_loop(self):
        """Seeds first, then one pass per frontier batch until a batch is empty"""
        seeds = self.frontier.seed(self.start_urls)
        self.metrics.seeds = len(seeds)

        for url in seeds:
            await self._visit(url, is_seed=True)

        while True:
            batch = self.frontier.next_batch()
            if not batch:
                break

            self.metrics.passes += 1
            logger.info(f"Pass {self.metrics.passes}: {len(batch)} pending links")

            for url in batch:
                # Marked before dispatch: a URL that raises is never retried
                if not self.frontier.mark_visited(url):
                    continue

                stats = self.frontier.get_statistics()
                logger.info(f"Visiting link {stats['visited']} of {stats['discovered']}: {url}")
                await self._visit(url)

        logger.info(f"Frontier exhausted after {self.metrics.passes} passes")

    async def _visit(self, url: str, is_seed: bool = False) -> Optional[PageOutcome]:
        """Process one URL; per-page failures are logged and never abort the run"""
        try:
            outcome = await self.processor.process(url, self.frontier.visited_view)
        except Exception as e:
            message = f"{url} ({e})" if is_seed else f"{url} - {e}"
            await self.result_log.write(ResultCategory.ERROR, message)
            self.error_handler.record_exception(url, e)
            self.metrics.record_exception()
            logger.error(f"Failed to process {url}: {e}")
            return None

        new_links = 0
        if outcome.success:
            new_links = self.frontier.record_discovered(outcome.discovered_links)
            if new_links:
                logger.info(
                    f"Found {new_links} new follow links on {url}, "
                    f"{len(self.frontier.discovered)} in total"
                )
        else:
            self.error_handler.record_classified(url, outcome.status, outcome.is_error_page)

        self.metrics.record_outcome(outcome.success, new_links)
        return outcome
