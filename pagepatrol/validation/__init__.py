"""
Open Graph image validation
"""

from .og_image_validator import (
    ImageValidationResult,
    validate_dimensions,
    validate_og_image,
    read_og_image_url,
)
from .image_loader import ImageLoader, BrowserImageLoader, HttpImageLoader

__all__ = [
    'ImageValidationResult',
    'validate_dimensions',
    'validate_og_image',
    'read_og_image_url',
    'ImageLoader',
    'BrowserImageLoader',
    'HttpImageLoader'
]
