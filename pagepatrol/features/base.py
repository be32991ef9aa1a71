"""
Base Feature Interface - Abstract base class for optional page checks
"""

from abc import ABC, abstractmethod
from playwright.async_api import Page


class CrawlerFeature(ABC):
    """Base interface for all crawler features

    Features run inside the page processor, after navigation and cookie
    dismissal and before pagination expansion.
    """

    @abstractmethod
    async def initialize(self, crawler) -> None:
        """Initialize the feature when crawler starts"""
        pass

    @abstractmethod
    async def before_crawl(self, crawler) -> None:
        """Called once the browser is running, before the first page"""
        pass

    @abstractmethod
    async def process_page(self, page: Page, url: str, processor) -> None:
        """Inspect a rendered page"""
        pass

    @abstractmethod
    async def finalize(self, crawler) -> None:
        """Clean up when crawling completes"""
        pass
