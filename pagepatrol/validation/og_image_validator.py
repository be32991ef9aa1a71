"""
OG Image Validator - classifies the og:image of a page as valid or invalid

Rules are applied in a fixed order and the first failure decides the reason:

1. minimum size: both sides >= 200px
2. pixel area ceiling: width * height <= 8 * 1024 * 1024
3. aspect ratio: |width / height - 1.9| < 0.2
4. resolution tier: >= 1200x630 (high) or >= 600x315 (standard)
"""

import logging
from dataclasses import dataclass
from typing import Optional
from playwright.async_api import Page
from .image_loader import ImageLoader

logger = logging.getLogger(__name__)

MIN_SIDE = 200
MAX_PIXELS = 8 * 1024 * 1024
TARGET_RATIO = 1.9
RATIO_TOLERANCE = 0.2
HIGH_RESOLUTION = (1200, 630)
STANDARD_RESOLUTION = (600, 315)

NO_IMAGE = "No OG image found"
LOAD_FAILED = "Failed to load image"
TOO_SMALL = "Dimensions below minimum size (200x200)"
TOO_LARGE = "Size exceeds maximum allowed (8 MB)"
BAD_RATIO = "Invalid aspect ratio"
LOW_RESOLUTION = "Resolution below minimum standards"


@dataclass
class ImageValidationResult:
    """Outcome of validating one page's og:image"""
    url: Optional[str]
    width: Optional[int] = None
    height: Optional[int] = None
    ratio: float = 0.0
    valid: bool = False
    reason: Optional[str] = None

    def to_log_message(self, page_url: str) -> str:
        reason = f" - {self.reason}" if self.reason else ""
        return f"{page_url} - {self.url} - {self.width}x{self.height}px r: {self.ratio}{reason}"


def validate_dimensions(image_url: Optional[str], width: Optional[int],
                        height: Optional[int]) -> ImageValidationResult:
    """Classify an image from its intrinsic dimensions"""
    if not image_url:
        return ImageValidationResult(url=None, reason=NO_IMAGE)

    if not width or not height:
        return ImageValidationResult(url=image_url, reason=LOAD_FAILED)

    ratio = width / height
    result = ImageValidationResult(url=image_url, width=width, height=height, ratio=ratio)

    if width < MIN_SIDE or height < MIN_SIDE:
        result.reason = TOO_SMALL
    elif width * height > MAX_PIXELS:
        result.reason = TOO_LARGE
    elif not abs(ratio - TARGET_RATIO) < RATIO_TOLERANCE:
        result.reason = BAD_RATIO
    elif not _meets_resolution_tier(width, height):
        result.reason = LOW_RESOLUTION
    else:
        result.valid = True

    return result


def _meets_resolution_tier(width: int, height: int) -> bool:
    high = width >= HIGH_RESOLUTION[0] and height >= HIGH_RESOLUTION[1]
    standard = width >= STANDARD_RESOLUTION[0] and height >= STANDARD_RESOLUTION[1]
    return high or standard


async def read_og_image_url(page: Page) -> Optional[str]:
    """Content of meta[property="og:image"], or None"""
    element = await page.query_selector('meta[property="og:image"]')
    if not element:
        return None
    content = await element.get_attribute('content')
    return content or None


async def validate_og_image(page: Page, loader: ImageLoader) -> ImageValidationResult:
    """Read the page's og:image and validate it through the loader

    Load failures are part of the result, never raised.
    """
    image_url = await read_og_image_url(page)
    if not image_url:
        return validate_dimensions(None, None, None)

    try:
        dimensions = await loader.load(image_url)
    except Exception as e:
        logger.warning(f"Failed to load og:image {image_url}: {e}")
        dimensions = None

    if not dimensions:
        return validate_dimensions(image_url, None, None)

    width, height = dimensions
    return validate_dimensions(image_url, width, height)
