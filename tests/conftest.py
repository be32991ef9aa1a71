# File: tests/conftest.py
# In-memory stand-ins for the Playwright page/session used by the crawler
from __future__ import annotations

import io
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

import pytest
from PIL import Image
from playwright.async_api import Error as PlaywrightError
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from pagepatrol.config import CrawlConfig
from pagepatrol.frontier import normalize_url
from pagepatrol.storage import ResultLog

COOKIE_SELECTOR = "#onetrust-accept-btn-handler"
TRIGGER_SELECTOR = 'a[href*="/feed-page-"] button'
FOLLOW_SELECTOR = 'a[rel="follow"]'


def png_bytes(width: int = 8, height: int = 8) -> bytes:
    buffer = io.BytesIO()
    Image.new("RGB", (width, height), "white").save(buffer, format="PNG")
    return buffer.getvalue()


# --------------------------------------------------------------------------- #
#                               Fake site model                               #
# --------------------------------------------------------------------------- #


@dataclass
class FakePageSpec:
    """What a URL renders to in the fake browser."""
    status: int = 200
    text: str = "Welcome to the page"
    headings: Dict[str, str] = field(default_factory=dict)
    og_image: Optional[str] = None
    links: List[str] = field(default_factory=list)
    more_batches: List[List[str]] = field(default_factory=list)
    trigger_always: bool = False
    trigger_click_error: bool = False
    cookie_banner: bool = False
    image: Optional[Tuple[int, int]] = None
    raises: Optional[Exception] = None
    scroll_height: int = 800
    screenshot: Optional[bytes] = None


class FakeResponse:
    def __init__(self, status: int):
        self.status = status


class FakeElement:
    def __init__(self, page: "FakePage", text: Optional[str] = None,
                 attributes: Optional[Dict[str, str]] = None, on_click=None):
        self.page = page
        self.text = text
        self.attributes = attributes or {}
        self.on_click = on_click

    async def text_content(self):
        return self.text

    async def get_attribute(self, name: str):
        return self.attributes.get(name)

    async def click(self):
        if self.on_click:
            self.on_click()


class FakePage:
    """Implements the subset of playwright.async_api.Page the crawler calls."""

    def __init__(self, session: "FakeSession"):
        self.session = session
        self.spec = FakePageSpec(status=404, text="Not found")
        self.url = None
        self.links: List[str] = []
        self.batches: List[List[str]] = []
        self.closed = False
        self.trigger_clicks = 0
        self.cookies_accepted = False
        self.scroll_y = 0
        self.viewport_height = 800

    async def goto(self, url, wait_until=None, timeout=None):
        self.url = url
        self.session.navigations.append(url)
        spec = self.session.site.get(normalize_url(url))
        if spec is None:
            spec = FakePageSpec(status=404, text="Not found")
        if spec.raises is not None:
            raise spec.raises
        self.spec = spec
        self.links = list(spec.links)
        self.batches = [list(batch) for batch in spec.more_batches]
        return FakeResponse(spec.status)

    async def wait_for_selector(self, selector, timeout=None):
        if selector == COOKIE_SELECTOR and self.spec.cookie_banner:
            return FakeElement(self)
        raise PlaywrightTimeoutError(f"Timeout {timeout}ms exceeded.")

    async def click(self, selector):
        if selector == COOKIE_SELECTOR:
            self.cookies_accepted = True

    def _reveal_more(self):
        if self.spec.trigger_click_error:
            raise PlaywrightError("Element is not attached to the DOM")
        self.trigger_clicks += 1
        if self.batches:
            self.links.extend(self.batches.pop(0))

    async def query_selector(self, selector):
        if selector in self.spec.headings:
            return FakeElement(self, text=self.spec.headings[selector])
        if selector == 'meta[property="og:image"]':
            if self.spec.og_image is None:
                return None
            return FakeElement(self, attributes={"content": self.spec.og_image})
        if selector == TRIGGER_SELECTOR:
            if self.batches or self.spec.trigger_always:
                return FakeElement(self, on_click=self._reveal_more)
            return None
        return None

    async def eval_on_selector_all(self, selector, script):
        if selector == FOLLOW_SELECTOR:
            return list(self.links)
        return []

    async def evaluate(self, script, arg=None):
        if "innerText" in script:
            return self.spec.text
        if "naturalWidth" in script:
            return list(self.spec.image) if self.spec.image else None
        if "scrollBy" in script:
            self.scroll_y += arg
            return None
        if "scrollHeight" in script:
            return self.scroll_y + self.viewport_height >= self.spec.scroll_height
        raise AssertionError(f"Unexpected script: {script}")

    async def screenshot(self, full_page=False, type="png"):
        if self.spec.screenshot is not None:
            return self.spec.screenshot
        return png_bytes()

    async def close(self):
        self.closed = True


class FakeSession:
    """Stands in for BrowserSession; serves pages from an in-memory site map."""

    def __init__(self, site: Optional[Dict[str, FakePageSpec]] = None,
                 start_error: Optional[Exception] = None):
        self.site = {normalize_url(url): spec for url, spec in (site or {}).items()}
        self.start_error = start_error
        self.started = False
        self.closed = False
        self.pages: List[FakePage] = []
        self.navigations: List[str] = []

    async def start(self):
        if self.start_error is not None:
            raise self.start_error
        self.started = True

    async def close(self):
        self.closed = True

    async def new_page(self):
        page = FakePage(self)
        self.pages.append(page)
        return page


# --------------------------------------------------------------------------- #
#                                  Fixtures                                   #
# --------------------------------------------------------------------------- #


@pytest.fixture()
def crawl_config(tmp_path) -> CrawlConfig:
    """Config with delays removed so the suite stays fast."""
    return CrawlConfig(
        start_urls=["https://example.com"],
        log_root=tmp_path / "logs",
        expansion_delay=0,
        scroll_delay=0,
        timezone="UTC",
    )


@pytest.fixture()
def result_log(tmp_path) -> ResultLog:
    return ResultLog(tmp_path / "run")


@pytest.fixture()
def fake_session() -> FakeSession:
    return FakeSession()
