"""
OG Image Feature - Validates the og:image of every visited page
"""

import logging
from .base import CrawlerFeature
from ..storage import ResultCategory
from ..validation import BrowserImageLoader, HttpImageLoader, validate_og_image

logger = logging.getLogger(__name__)


class OgImageFeature(CrawlerFeature):
    """Logs the og:image validation result to og_images/success.txt or og_images/error.txt"""

    def __init__(self, loader: str = None):
        self.loader_name = loader
        self.loader = None
        self.valid_count = 0
        self.invalid_count = 0

    async def initialize(self, crawler):
        loader_name = self.loader_name or crawler.config.image_loader
        if loader_name == "http":
            self.loader = HttpImageLoader()
        else:
            self.loader = BrowserImageLoader(crawler.session)
        logger.info(f"OG image validation initialized (loader={loader_name})")

    async def before_crawl(self, crawler):
        pass

    async def process_page(self, page, url, processor):
        result = await validate_og_image(page, self.loader)

        if result.valid:
            category = ResultCategory.OG_IMAGES_SUCCESS
            self.valid_count += 1
        else:
            category = ResultCategory.OG_IMAGES_ERROR
            self.invalid_count += 1

        await processor.result_log.write(category, result.to_log_message(url))

    async def finalize(self, crawler):
        logger.info(f"OG image validation: {self.valid_count} valid, {self.invalid_count} invalid")
