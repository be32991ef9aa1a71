"""
Heading Tags Feature - Logs which heading levels each page has
"""

import logging
from typing import Dict, Sequence
from .base import CrawlerFeature
from ..inspection import heading_presence
from ..storage import ResultCategory

logger = logging.getLogger(__name__)


class HeadingTagsFeature(CrawlerFeature):
    """Writes one heading line per page to tags/success.txt or tags/error.txt

    A page goes to the success log when every required level is present.
    """

    def __init__(self, levels: Sequence[str] = None, required_levels: Sequence[str] = ("h1",)):
        self.levels = tuple(levels) if levels else None
        self.required_levels = tuple(required_levels)
        self.pages_passed = 0
        self.pages_failed = 0

    async def initialize(self, crawler):
        if self.levels is None:
            self.levels = tuple(crawler.config.heading_levels)
        logger.info(f"Heading check initialized (levels={', '.join(self.levels)})")

    async def before_crawl(self, crawler):
        pass

    @staticmethod
    def format_report(url: str, report: Dict[str, bool]) -> str:
        parts = [
            f'"{level}" found' if present else f'"{level}" not found'
            for level, present in report.items()
        ]
        return f"{url} - {', '.join(parts)}"

    def passes(self, report: Dict[str, bool]) -> bool:
        return all(report.get(level, False) for level in self.required_levels)

    async def process_page(self, page, url, processor):
        report = await heading_presence(page, self.levels)

        if self.passes(report):
            category = ResultCategory.TAGS_SUCCESS
            self.pages_passed += 1
        else:
            category = ResultCategory.TAGS_ERROR
            self.pages_failed += 1

        await processor.result_log.write(category, self.format_report(url, report))

    async def finalize(self, crawler):
        logger.info(f"Heading check: {self.pages_passed} passed, {self.pages_failed} failed")
