"""
Page inspection helpers that run against a rendered Playwright page
"""

from .page_inspector import (
    PaginationReport,
    accept_cookies,
    expand_pagination,
    extract_links,
    has_error_signal,
    heading_presence,
    scroll_to_bottom,
    visible_text,
)

__all__ = [
    'PaginationReport',
    'accept_cookies',
    'expand_pagination',
    'extract_links',
    'has_error_signal',
    'heading_presence',
    'scroll_to_bottom',
    'visible_text'
]
