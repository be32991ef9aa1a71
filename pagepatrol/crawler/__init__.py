"""
Crawler - run controller, page processor and builder
"""

from .base import BaseCrawler
from .builder import CrawlerBuilder
from .page_processor import PageProcessor
from .result import PageOutcome

__all__ = ['BaseCrawler', 'CrawlerBuilder', 'PageProcessor', 'PageOutcome']
