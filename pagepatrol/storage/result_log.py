"""
Result Log - append-only categorized text logs for one crawl run
"""

import logging
import aiofiles
from pathlib import Path
from typing import Dict, List
from .result_category import ResultCategory

logger = logging.getLogger(__name__)


class ResultLog:
    """Appends one line per message to category files under a run directory

    Layout:
    - <run_dir>/success.txt, error.txt, complete.txt
    - <run_dir>/tags/success.txt, tags/error.txt
    - <run_dir>/og_images/success.txt, og_images/error.txt
    """

    def __init__(self, run_dir):
        self.run_dir = Path(run_dir)
        self.line_counts: Dict[ResultCategory, int] = {}
        self.setup_directories()

    def setup_directories(self):
        """Create the run directory - category subdirectories are created on demand"""
        self.run_dir.mkdir(parents=True, exist_ok=True)

    def path_for(self, category: ResultCategory) -> Path:
        return self.run_dir / category.value

    @staticmethod
    def clean_message(message: str) -> str:
        """Collapse a message to a single line"""
        return message.replace('\r\n', ' ').replace('\n', ' ').replace('\r', ' ')

    async def write(self, category: ResultCategory, message: str) -> Path:
        """Append a message to the category file and return its path"""
        file_path = self.path_for(category)
        file_path.parent.mkdir(parents=True, exist_ok=True)

        async with aiofiles.open(file_path, 'a', encoding='utf-8') as f:
            await f.write(f"{self.clean_message(message)}\n")

        self.line_counts[category] = self.line_counts.get(category, 0) + 1
        logger.debug(f"[{category.value}] {message}")
        return file_path

    def read_lines(self, category: ResultCategory) -> List[str]:
        """Lines written so far for a category"""
        file_path = self.path_for(category)
        if not file_path.exists():
            return []
        return file_path.read_text(encoding='utf-8').splitlines()

    def get_log_stats(self) -> Dict[str, int]:
        return {category.value: count for category, count in self.line_counts.items()}
