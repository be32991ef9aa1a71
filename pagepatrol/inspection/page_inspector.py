"""
Page Inspector - headings, error signal, pagination expansion and link extraction
"""

import asyncio
import logging
from dataclasses import dataclass
from typing import AbstractSet, Dict, List, Optional, Sequence
from playwright.async_api import Page
from playwright.async_api import Error as PlaywrightError
from playwright.async_api import TimeoutError as PlaywrightTimeoutError
from ..config import ErrorSignal
from ..frontier import normalize_url

logger = logging.getLogger(__name__)

DEFAULT_HEADING_LEVELS = ("h1", "h2", "h3", "h4", "h5")

_HREFS_SCRIPT = "anchors => anchors.map(anchor => anchor.href)"


@dataclass
class PaginationReport:
    """What one expand_pagination call did"""
    activations: int = 0
    links_seen: int = 0
    stop_reason: str = ""
    error: Optional[str] = None


async def heading_presence(page: Page, levels: Sequence[str] = DEFAULT_HEADING_LEVELS) -> Dict[str, bool]:
    """For each level, whether its first element has non-empty text

    Levels are checked independently of each other.
    """
    report = {}
    for level in levels:
        element = await page.query_selector(level)
        text = await element.text_content() if element else None
        report[level] = bool(text)
    return report


async def visible_text(page: Page) -> str:
    return await page.evaluate("() => (document.body && document.body.innerText) || ''")


async def has_error_signal(page: Page, signal: ErrorSignal = None) -> bool:
    """True if the page text trips the configured error heuristic"""
    signal = signal or ErrorSignal()
    return signal.matches(await visible_text(page))


async def accept_cookies(page: Page, selector: str = '#onetrust-accept-btn-handler',
                         timeout_ms: int = 5000) -> bool:
    """Click the cookie-consent button if it shows up within the timeout

    Best effort: returns False when the button never appears or the click
    fails, never raises.
    """
    try:
        await page.wait_for_selector(selector, timeout=timeout_ms)
        await page.click(selector)
    except PlaywrightTimeoutError:
        return False
    except PlaywrightError as e:
        logger.debug(f"Cookie banner click failed: {e}")
        return False

    logger.info("Cookies accepted")
    return True


async def scroll_to_bottom(page: Page, distance: int = 300, delay: float = 0.025,
                           max_steps: int = 2000) -> int:
    """Scroll in fixed steps until the viewport reaches the content height

    Returns:
        Number of scroll steps taken (bounded by max_steps)
    """
    steps = 0
    while steps < max_steps:
        at_bottom = await page.evaluate(
            """() => {
                const el = document.scrollingElement || document.documentElement;
                return el.scrollTop + window.innerHeight >= el.scrollHeight;
            }"""
        )
        if at_bottom:
            break

        await page.evaluate("y => window.scrollBy(0, y)", distance)
        steps += 1
        await asyncio.sleep(delay)

    return steps


async def _anchor_hrefs(page: Page, link_selector: str) -> List[str]:
    hrefs = await page.eval_on_selector_all(link_selector, _HREFS_SCRIPT)
    return [href for href in hrefs if href]


async def expand_pagination(page: Page, trigger_selector: str,
                            link_selector: str = 'a[rel="follow"]',
                            max_expansions: int = 20, delay: float = 0.85) -> PaginationReport:
    """Click a "load more" control until it stops revealing new links

    Stops when the control is gone, when no unseen link is present before
    an activation, or after max_expansions activations. The seen-link set
    lives only for the duration of this call.
    """
    report = PaginationReport()
    seen = set()

    while True:
        trigger = await page.query_selector(trigger_selector)
        if not trigger:
            report.stop_reason = "trigger_absent"
            break

        unseen = []
        for href in await _anchor_hrefs(page, link_selector):
            normalized = normalize_url(href)
            if normalized not in seen and normalized not in unseen:
                unseen.append(normalized)

        if not unseen:
            report.stop_reason = "no_new_links"
            break

        if report.activations >= max_expansions:
            report.stop_reason = "max_expansions"
            break

        try:
            await trigger.click()
        except PlaywrightError as e:
            logger.warning(f"Failed to click pagination control: {e}")
            report.error = str(e)
            report.stop_reason = "click_failed"
            break

        report.activations += 1
        seen.update(unseen)
        await asyncio.sleep(delay)

    report.links_seen = len(seen)
    if report.activations:
        logger.info(f"Pagination expanded {report.activations} times ({report.stop_reason})")
    return report


async def extract_links(page: Page, visited: AbstractSet[str],
                        link_selector: str = 'a[rel="follow"]') -> List[str]:
    """Hrefs of follow-marked anchors not visited yet, first-seen order, no repeats"""
    links = []
    collected = set()

    for href in await _anchor_hrefs(page, link_selector):
        normalized = normalize_url(href)
        if normalized in visited or normalized in collected:
            continue
        collected.add(normalized)
        links.append(href)

    return links
