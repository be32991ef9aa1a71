# File: tests/test_page_inspector.py
from __future__ import annotations

import pytest

from pagepatrol.config import ErrorSignal
from pagepatrol.inspection import (
    accept_cookies,
    expand_pagination,
    extract_links,
    has_error_signal,
    heading_presence,
    scroll_to_bottom,
)
from tests.conftest import TRIGGER_SELECTOR, FakePageSpec, FakeSession

URL = "https://example.com"


async def open_page(spec: FakePageSpec):
    session = FakeSession({URL: spec})
    page = await session.new_page()
    await page.goto(URL)
    return page


# --------------------------------------------------------------------------- #
#                                  Headings                                   #
# --------------------------------------------------------------------------- #


@pytest.mark.asyncio()
async def test_heading_levels_are_independent():
    page = await open_page(FakePageSpec(headings={"h1": "", "h3": "Section"}))

    report = await heading_presence(page)

    assert report == {"h1": False, "h2": False, "h3": True, "h4": False, "h5": False}


# --------------------------------------------------------------------------- #
#                                Error signal                                 #
# --------------------------------------------------------------------------- #


@pytest.mark.asyncio()
@pytest.mark.parametrize(
    "text,signal,expected",
    [
        ("All good here", ErrorSignal(), False),
        ("Unexpected ERROR occurred", ErrorSignal(), True),
        ("", ErrorSignal(), True),
        ("Error page", ErrorSignal("application error", empty_is_error=False), False),
        ("Application Error: crash", ErrorSignal("application error", empty_is_error=False), True),
        ("", ErrorSignal("application error", empty_is_error=False), False),
    ],
)
async def test_error_signal_variants(text, signal, expected):
    page = await open_page(FakePageSpec(text=text))
    assert await has_error_signal(page, signal) is expected


# --------------------------------------------------------------------------- #
#                                   Cookies                                   #
# --------------------------------------------------------------------------- #


@pytest.mark.asyncio()
async def test_cookie_banner_is_clicked_when_present():
    page = await open_page(FakePageSpec(cookie_banner=True))
    assert await accept_cookies(page) is True
    assert page.cookies_accepted


@pytest.mark.asyncio()
async def test_missing_cookie_banner_does_not_raise():
    page = await open_page(FakePageSpec(cookie_banner=False))
    assert await accept_cookies(page, timeout_ms=10) is False
    assert not page.cookies_accepted


# --------------------------------------------------------------------------- #
#                                  Scrolling                                  #
# --------------------------------------------------------------------------- #


@pytest.mark.asyncio()
async def test_scroll_until_content_height_reached():
    page = await open_page(FakePageSpec(scroll_height=2000))
    steps = await scroll_to_bottom(page, distance=300, delay=0)
    # 800px viewport needs 1200px of scrolling: 4 steps of 300px
    assert steps == 4


@pytest.mark.asyncio()
async def test_scroll_is_bounded():
    page = await open_page(FakePageSpec(scroll_height=10 ** 9))
    assert await scroll_to_bottom(page, distance=300, delay=0, max_steps=5) == 5


# --------------------------------------------------------------------------- #
#                            Pagination expansion                             #
# --------------------------------------------------------------------------- #


@pytest.mark.asyncio()
async def test_expansion_stops_without_trigger():
    page = await open_page(FakePageSpec(links=[f"{URL}/a"]))

    report = await expand_pagination(page, TRIGGER_SELECTOR, delay=0)

    assert report.activations == 0
    assert report.stop_reason == "trigger_absent"


@pytest.mark.asyncio()
async def test_expansion_halts_at_ceiling_while_links_keep_coming():
    batches = [[f"{URL}/p{i}"] for i in range(100)]
    page = await open_page(FakePageSpec(links=[f"{URL}/a"], more_batches=batches))

    report = await expand_pagination(page, TRIGGER_SELECTOR, delay=0)

    assert report.activations == 20
    assert page.trigger_clicks == 20
    assert report.stop_reason == "max_expansions"


@pytest.mark.asyncio()
async def test_expansion_halts_once_an_activation_reveals_nothing():
    page = await open_page(FakePageSpec(
        links=[f"{URL}/a"],
        more_batches=[[f"{URL}/b"], [f"{URL}/b/"]],
        trigger_always=True,
    ))

    report = await expand_pagination(page, TRIGGER_SELECTOR, delay=0)

    assert report.activations == 2
    assert report.links_seen == 2
    assert report.stop_reason == "no_new_links"


@pytest.mark.asyncio()
async def test_expansion_state_does_not_leak_between_calls():
    spec = FakePageSpec(links=[f"{URL}/a"], more_batches=[[]], trigger_always=True)

    first = await expand_pagination(await open_page(spec), TRIGGER_SELECTOR, delay=0)
    second = await expand_pagination(await open_page(spec), TRIGGER_SELECTOR, delay=0)

    assert first.activations == second.activations == 1


@pytest.mark.asyncio()
async def test_click_failure_is_reported_not_raised():
    page = await open_page(FakePageSpec(
        links=[f"{URL}/a"], trigger_always=True, trigger_click_error=True
    ))

    report = await expand_pagination(page, TRIGGER_SELECTOR, delay=0)

    assert report.stop_reason == "click_failed"
    assert "not attached" in report.error
    assert report.activations == 0


# --------------------------------------------------------------------------- #
#                               Link extraction                               #
# --------------------------------------------------------------------------- #


@pytest.mark.asyncio()
async def test_extract_links_skips_visited_and_repeats():
    page = await open_page(FakePageSpec(links=[
        f"{URL}/b", f"{URL}/a/", f"{URL}/c", f"{URL}/b/", f"{URL}/a", f"{URL}/d",
    ]))

    links = await extract_links(page, visited=frozenset({f"{URL}/c"}))

    assert links == [f"{URL}/b", f"{URL}/a/", f"{URL}/d"]
