"""
Crawler Features - Optional checks run against every visited page
"""

from .base import CrawlerFeature
from .screenshot_feature import ScreenshotFeature
from .heading_tags_feature import HeadingTagsFeature
from .og_image_feature import OgImageFeature

__all__ = [
    'CrawlerFeature',
    'ScreenshotFeature',
    'HeadingTagsFeature',
    'OgImageFeature'
]
