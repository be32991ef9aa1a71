"""
Crawl frontier - URL normalization and breadth-first dedup state
"""

from .url_normalizer import normalize_url
from .crawl_frontier import CrawlFrontier

__all__ = [
    'normalize_url',
    'CrawlFrontier'
]
