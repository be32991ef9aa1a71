"""
Crawl Configuration - settings shared by the run controller, processor and features
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Tuple


@dataclass
class ErrorSignal:
    """Text heuristic that marks a rendered page as a failure state

    The page text is lowercased before matching. `ErrorSignal("application error",
    empty_is_error=False)` gives the narrower variant.
    """
    pattern: str = "error"
    empty_is_error: bool = True

    def matches(self, visible_text: str) -> bool:
        text = (visible_text or "").lower()
        if not text:
            return self.empty_is_error
        return self.pattern.lower() in text


@dataclass
class CrawlConfig:
    """Configuration for one crawl run"""
    start_urls: List[str] = None

    # Optional checks
    validate_og_images: bool = False
    validate_heading_tags: bool = False
    take_screenshots: bool = False

    # Selectors
    follow_link_selector: str = 'a[rel="follow"]'
    pagination_selector: str = 'a[href*="/feed-page-"] button'
    cookie_selector: str = '#onetrust-accept-btn-handler'
    heading_levels: Tuple[str, ...] = ("h1", "h2", "h3", "h4", "h5")

    error_signal: ErrorSignal = field(default_factory=ErrorSignal)

    # Timing and limits
    cookie_timeout_ms: int = 5000
    max_expansions: int = 20
    expansion_delay: float = 0.85
    scroll_distance: int = 300
    scroll_delay: float = 0.025
    max_scroll_steps: int = 2000
    navigation_timeout_ms: int = 30000  # 0 disables the timeout

    # Browser
    headless: bool = True
    viewport_width: int = 1280
    viewport_height: int = 800
    image_loader: str = "browser"  # "browser" or "http"

    # Output
    log_root: Path = None
    timezone: str = "America/Sao_Paulo"
    screenshot_quality: int = 70
    log_level: str = "INFO"

    def __post_init__(self):
        if self.start_urls is None:
            self.start_urls = []
        if self.log_root is None:
            self.log_root = Path("logs")
        self.log_root = Path(self.log_root)
        if self.image_loader not in ("browser", "http"):
            raise ValueError(f"Unknown image loader: {self.image_loader}")
