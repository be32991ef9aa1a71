"""
Screenshot Storage - mirrors URL paths into a screenshot tree and saves WebP images
"""

import io
import re
import logging
import aiofiles
from pathlib import Path
from urllib.parse import urlparse
from PIL import Image
from ..utils import generate_filename

logger = logging.getLogger(__name__)

_UNSAFE_PATH_CHARS = re.compile(r'[^a-zA-Z0-9/-]')

# Largest side libwebp can encode
WEBP_MAX_SIDE = 16383


def screenshot_dir_for(url: str, root_dir) -> Path:
    """Directory for a URL's screenshots, mirrored from the URL path

    Characters outside [A-Za-z0-9/-] become '_'. An empty path or a path
    ending in '/' gets a trailing 'home' segment, so the site root lands
    in <root>/home.
    """
    url_path = urlparse(url).path or '/'
    clean_path = _UNSAFE_PATH_CHARS.sub('_', url_path)
    if clean_path.endswith('/'):
        clean_path = f"{clean_path}home"

    return Path(root_dir) / clean_path.lstrip('/')


class ScreenshotStorage:
    """Saves full-page captures as WebP files"""

    def __init__(self, root_dir, quality: int = 70, timezone: str = "America/Sao_Paulo"):
        self.root_dir = Path(root_dir)
        self.quality = quality
        self.timezone = timezone

    def get_file_path(self, url: str, base_name: str = "index") -> Path:
        """<root>/<mirrored path>/<base_name>-<timestamp>.webp, parents created"""
        directory = screenshot_dir_for(url, self.root_dir)
        directory.mkdir(parents=True, exist_ok=True)
        return directory / generate_filename(base_name, "webp", self.timezone)

    async def save(self, url: str, png_bytes: bytes, base_name: str = "index") -> Path:
        """Convert a PNG capture to WebP and write it"""
        file_path = self.get_file_path(url, base_name)

        image = Image.open(io.BytesIO(png_bytes))
        if max(image.size) > WEBP_MAX_SIDE:
            logger.debug(f"Scaling {image.size[0]}x{image.size[1]} capture of {url} to fit WebP")
            image.thumbnail((WEBP_MAX_SIDE, WEBP_MAX_SIDE))
        output = io.BytesIO()
        image.save(output, format='WEBP', quality=self.quality)

        async with aiofiles.open(file_path, 'wb') as f:
            await f.write(output.getvalue())

        logger.debug(f"Saved screenshot for {url} to {file_path}")
        return file_path
