import logging
from playwright.async_api import async_playwright, Page

logger = logging.getLogger(__name__)


class BrowserSession:
    """Owns the Playwright browser and hands out isolated pages"""

    def __init__(self, headless=True, viewport_width=1280, viewport_height=800,
                 navigation_timeout_ms=30000):
        self.headless = headless
        self.viewport_width = viewport_width
        self.viewport_height = viewport_height
        self.navigation_timeout_ms = navigation_timeout_ms
        self.browser = None
        self.context = None
        self.playwright = None

    async def __aenter__(self):
        """Async context manager entry"""
        await self.start()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit"""
        await self.close()

    async def start(self):
        """Launch Chromium and create the browsing context"""
        try:
            self.playwright = await async_playwright().start()

            self.browser = await self.playwright.chromium.launch(
                headless=self.headless,
                args=[
                    '--no-sandbox',
                    '--disable-dev-shm-usage',
                    '--disable-gpu'
                ]
            )

            self.context = await self.browser.new_context(
                viewport={'width': self.viewport_width, 'height': self.viewport_height}
            )
            self.context.set_default_navigation_timeout(self.navigation_timeout_ms)

        except Exception as e:
            logger.error(f"Failed to start browser: {e}")
            await self.close()
            raise

    async def close(self):
        """Clean up browser resources"""
        try:
            if self.context:
                await self.context.close()
            if self.browser:
                await self.browser.close()
            if self.playwright:
                await self.playwright.stop()
        except Exception as e:
            logger.error(f"Error closing browser: {e}")
        finally:
            self.context = None
            self.browser = None
            self.playwright = None

    async def new_page(self) -> Page:
        """Open a fresh page in the shared context"""
        if not self.context:
            raise RuntimeError("Browser not initialized. Use 'async with' or call start() first")
        return await self.context.new_page()
