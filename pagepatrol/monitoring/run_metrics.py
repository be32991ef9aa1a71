import time
import logging
from dataclasses import dataclass, field, asdict
from typing import Dict, Any

logger = logging.getLogger(__name__)


@dataclass
class RunMetrics:
    """Per-run counters, returned as the crawl summary"""
    seeds: int = 0
    pages_processed: int = 0
    successes: int = 0
    classified_errors: int = 0
    exceptions: int = 0
    passes: int = 0
    links_discovered: int = 0
    started_at: float = field(default_factory=time.time)
    finished_at: float = 0.0

    def record_outcome(self, success: bool, new_links: int = 0):
        self.pages_processed += 1
        if success:
            self.successes += 1
            self.links_discovered += new_links
        else:
            self.classified_errors += 1

    def record_exception(self):
        self.pages_processed += 1
        self.exceptions += 1

    def finish(self):
        self.finished_at = time.time()

    @property
    def duration_seconds(self) -> float:
        end = self.finished_at or time.time()
        return end - self.started_at

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data['duration_seconds'] = round(self.duration_seconds, 2)
        return data

    def log_summary(self):
        logger.info(
            f"Run summary: {self.pages_processed} pages, {self.successes} ok, "
            f"{self.classified_errors} errors, {self.exceptions} failures, "
            f"{self.links_discovered} links in {self.passes} passes "
            f"({self.duration_seconds:.1f}s)"
        )
