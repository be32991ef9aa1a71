"""
Crawler Builder - Fluent API for building crawlers with optional checks
"""

from dataclasses import replace
from pathlib import Path
from typing import List
from ..config import CrawlConfig, ErrorSignal
from ..features.screenshot_feature import ScreenshotFeature
from ..features.heading_tags_feature import HeadingTagsFeature
from ..features.og_image_feature import OgImageFeature
from .base import BaseCrawler


class CrawlerBuilder:
    """Builder for creating crawlers with various features

    Features always run in the same order: screenshots, heading tags,
    og:image.
    """

    def __init__(self, start_urls: List[str]):
        self.config = CrawlConfig(start_urls=list(start_urls))
        self._session = None

    @classmethod
    def from_config(cls, config: CrawlConfig):
        builder = cls(config.start_urls)
        builder.config = replace(config, start_urls=list(config.start_urls))
        return builder

    def with_screenshots(self, enable: bool = True):
        """Add full-page screenshot capture"""
        self.config.take_screenshots = enable
        return self

    def with_heading_validation(self, enable: bool = True):
        """Add heading tag presence checks"""
        self.config.validate_heading_tags = enable
        return self

    def with_og_image_validation(self, enable: bool = True, loader: str = None):
        """Add og:image validation, loader is "browser" or "http" """
        self.config.validate_og_images = enable
        if loader:
            self.config = replace(self.config, image_loader=loader)
        return self

    def error_signal(self, pattern: str = "error", empty_is_error: bool = True):
        self.config.error_signal = ErrorSignal(pattern=pattern, empty_is_error=empty_is_error)
        return self

    def log_root(self, path):
        self.config.log_root = Path(path)
        return self

    def with_session(self, session):
        """Use an existing browser session instead of launching Playwright"""
        self._session = session
        return self

    def build(self) -> BaseCrawler:
        """Build the configured crawler"""
        crawler = BaseCrawler(self.config, session=self._session)

        if self.config.take_screenshots:
            crawler.add_feature(ScreenshotFeature())
        if self.config.validate_heading_tags:
            crawler.add_feature(HeadingTagsFeature())
        if self.config.validate_og_images:
            crawler.add_feature(OgImageFeature())

        return crawler
