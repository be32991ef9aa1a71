"""
Image Loaders - fetch the intrinsic dimensions of an image URL
"""

import io
import logging
from typing import Optional, Protocol, Tuple
import aiohttp
from PIL import Image

logger = logging.getLogger(__name__)

Dimensions = Tuple[int, int]


class ImageLoader(Protocol):
    """Anything that can turn an image URL into (width, height)"""

    async def load(self, url: str) -> Optional[Dimensions]:
        ...


class BrowserImageLoader:
    """Loads the image in a short-lived browser page and reads its natural size"""

    def __init__(self, session):
        self.session = session

    async def load(self, url: str) -> Optional[Dimensions]:
        page = await self.session.new_page()
        try:
            await page.goto(url)
            dimensions = await page.evaluate(
                """() => {
                    const img = document.querySelector('img');
                    return img ? [img.naturalWidth, img.naturalHeight] : null;
                }"""
            )
        finally:
            await page.close()

        if not dimensions:
            return None
        return int(dimensions[0]), int(dimensions[1])


class HttpImageLoader:
    """Downloads the image with aiohttp and reads its size with Pillow"""

    def __init__(self, timeout: float = 30.0, user_agent: str = 'PagePatrol/0.1'):
        self.timeout = timeout
        self.user_agent = user_agent

    async def load(self, url: str) -> Optional[Dimensions]:
        headers = {'User-Agent': self.user_agent}
        timeout = aiohttp.ClientTimeout(total=self.timeout)

        async with aiohttp.ClientSession() as session:
            async with session.get(url, headers=headers, timeout=timeout) as response:
                if response.status != 200:
                    logger.warning(f"HTTP {response.status} while loading image {url}")
                    return None
                content = await response.read()

        return self.read_dimensions(content)

    @staticmethod
    def read_dimensions(content: bytes) -> Optional[Dimensions]:
        try:
            with Image.open(io.BytesIO(content)) as image:
                return image.size
        except (OSError, ValueError) as e:
            logger.warning(f"Could not decode image: {e}")
            return None
