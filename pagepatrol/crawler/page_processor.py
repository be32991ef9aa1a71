"""
Page Processor - one page visit from navigation to classification
"""

import logging
from typing import AbstractSet, List
from ..config import CrawlConfig
from ..features.base import CrawlerFeature
from ..frontier import normalize_url
from ..inspection import accept_cookies, expand_pagination, extract_links, has_error_signal
from ..storage import ResultCategory, ResultLog
from .result import PageOutcome

logger = logging.getLogger(__name__)


class PageProcessor:
    """Visits a URL, runs the enabled features and classifies the page

    The processor never touches the frontier: discovered links are
    returned on the outcome. Exceptions propagate to the caller, the page
    is closed on every path.
    """

    def __init__(self, session, result_log: ResultLog, config: CrawlConfig,
                 features: List[CrawlerFeature] = None):
        self.session = session
        self.result_log = result_log
        self.config = config
        self.features = features if features is not None else []

    async def process(self, url: str, visited: AbstractSet[str] = frozenset()) -> PageOutcome:
        config = self.config
        page = await self.session.new_page()

        try:
            response = await page.goto(url, wait_until='domcontentloaded')
            status = response.status if response else 0

            await accept_cookies(page, config.cookie_selector, config.cookie_timeout_ms)

            for feature in self.features:
                await feature.process_page(page, url, self)

            pagination = await expand_pagination(
                page,
                config.pagination_selector,
                link_selector=config.follow_link_selector,
                max_expansions=config.max_expansions,
                delay=config.expansion_delay
            )

            is_error_page = await has_error_signal(page, config.error_signal)
            outcome = PageOutcome(
                url=url,
                status=status,
                is_error_page=is_error_page,
                pagination=pagination
            )

            if outcome.success:
                await self.result_log.write(ResultCategory.SUCCESS, url)
                logger.info(f"Page reachable: {url}")
                hrefs = await extract_links(page, visited, config.follow_link_selector)
                outcome.discovered_links = [normalize_url(href) for href in hrefs]
            else:
                await self.result_log.write(ResultCategory.ERROR, f"{url} - {outcome.error_message}")
                logger.warning(f"Error on {url}: {outcome.error_message}")

            await self.result_log.write(ResultCategory.COMPLETE, url)
            return outcome

        finally:
            await page.close()
