"""
Crawl Frontier - visited/discovered bookkeeping for wave-based traversal
"""

import logging
from typing import Dict, FrozenSet, Iterable, List, Set
from .url_normalizer import normalize_url

logger = logging.getLogger(__name__)


class CrawlFrontier:
    """Decides what to visit next and when the traversal is complete

    Both sets only grow. `discovered` keeps insertion order so every
    batch comes out in discovery order, and it always contains every
    visited URL (seeds are recorded in both).

    Traversal is breadth-first per wave: `next_batch()` is a snapshot, so
    links found while a batch is being processed wait for the next call.
    """

    def __init__(self):
        self.visited: Set[str] = set()
        self.discovered: Dict[str, None] = {}

    def seed(self, urls: Iterable[str]) -> List[str]:
        """Register seed URLs as visited before they are processed

        A seed that fails while being processed is therefore never retried.

        Returns:
            The normalized seeds, duplicates removed, in input order
        """
        seeds = []
        for url in urls:
            normalized = normalize_url(url)
            if not normalized or normalized in self.visited:
                continue
            self.visited.add(normalized)
            self.discovered.setdefault(normalized, None)
            seeds.append(normalized)
        return seeds

    def mark_visited(self, url: str) -> bool:
        """Mark a URL as dispatched; False if it already was"""
        normalized = normalize_url(url)
        if normalized in self.visited:
            return False
        self.visited.add(normalized)
        self.discovered.setdefault(normalized, None)
        return True

    def record_discovered(self, links: Iterable[str]) -> int:
        """Union links into the discovered set

        Returns:
            Number of links that were not known before (the delta)
        """
        previous_total = len(self.discovered)
        for link in links:
            normalized = normalize_url(link)
            if normalized:
                self.discovered.setdefault(normalized, None)
        return len(self.discovered) - previous_total

    def next_batch(self) -> List[str]:
        """Discovered URLs not yet visited, in discovery order"""
        return [url for url in self.discovered if url not in self.visited]

    @property
    def is_exhausted(self) -> bool:
        return len(self.discovered) <= len(self.visited)

    @property
    def visited_view(self) -> FrozenSet[str]:
        """Read-only snapshot handed to link extraction"""
        return frozenset(self.visited)

    def get_statistics(self) -> Dict[str, int]:
        return {
            'visited': len(self.visited),
            'discovered': len(self.discovered),
            'pending': len(self.discovered) - len(self.visited)
        }
