"""
Page Outcome - Data structure for the result of one page visit
"""

from dataclasses import dataclass, field
from typing import List, Optional
from ..inspection import PaginationReport


@dataclass
class PageOutcome:
    """Result of processing a single URL"""
    url: str
    status: int = 0
    is_error_page: bool = False
    discovered_links: List[str] = field(default_factory=list)  # normalized
    pagination: Optional[PaginationReport] = None

    @property
    def success(self) -> bool:
        return 200 <= self.status < 300 and not self.is_error_page

    @property
    def error_message(self) -> Optional[str]:
        if self.success:
            return None
        if self.is_error_page:
            return f"(Page unavailable | Status {self.status})"
        return f"(Status {self.status})"
