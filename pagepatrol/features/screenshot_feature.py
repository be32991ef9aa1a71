"""
Screenshot Feature - Captures full-page screenshots of visited pages
"""

import logging
from .base import CrawlerFeature
from ..inspection import scroll_to_bottom
from ..storage import ScreenshotStorage

logger = logging.getLogger(__name__)


class ScreenshotFeature(CrawlerFeature):
    """Scrolls each page to the bottom and saves a WebP capture"""

    def __init__(self, base_name: str = "index"):
        self.base_name = base_name
        self.storage = None
        self.captured = 0

    async def initialize(self, crawler):
        config = crawler.config
        self.storage = ScreenshotStorage(
            crawler.run_dir / "screenshots",
            quality=config.screenshot_quality,
            timezone=config.timezone
        )
        logger.info("Screenshot feature initialized")

    async def before_crawl(self, crawler):
        self.storage.root_dir.mkdir(parents=True, exist_ok=True)

    async def process_page(self, page, url, processor):
        config = processor.config

        # Trigger lazy-loaded content before the capture
        await scroll_to_bottom(
            page,
            distance=config.scroll_distance,
            delay=config.scroll_delay,
            max_steps=config.max_scroll_steps
        )

        try:
            screenshot_bytes = await page.screenshot(full_page=True, type='png')
            path = await self.storage.save(url, screenshot_bytes, self.base_name)
        except Exception as e:
            logger.error(f"Screenshot error for {url}: {e}")
            return

        self.captured += 1
        logger.info(f"Screenshot: {url} -> {path}")

    async def finalize(self, crawler):
        logger.info(f"Screenshot feature captured {self.captured} pages")
