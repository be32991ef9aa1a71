"""
Browser capability backed by Playwright
"""

from .session import BrowserSession

__all__ = ['BrowserSession']
