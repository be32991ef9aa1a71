"""
Storage modules for result logs and screenshots
"""

from .result_category import ResultCategory
from .result_log import ResultLog
from .screenshot_storage import ScreenshotStorage, screenshot_dir_for

__all__ = [
    'ResultCategory',
    'ResultLog',
    'ScreenshotStorage',
    'screenshot_dir_for'
]
