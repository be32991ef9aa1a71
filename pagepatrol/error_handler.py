import time
import logging
from enum import Enum
from dataclasses import dataclass
from typing import Dict, List, Optional, Any
from collections import defaultdict
from playwright.async_api import Error as PlaywrightError
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

logger = logging.getLogger(__name__)


class ErrorType(Enum):
    """Classification of crawl errors"""
    NAVIGATION_TIMEOUT = "navigation_timeout"  # Playwright timeout while processing
    BROWSER_ERROR = "browser_error"            # any other Playwright failure
    HTTP_STATUS = "http_status"                # page loaded with a non-2xx status
    ERROR_SIGNAL = "error_signal"              # page text tripped the error heuristic
    UNKNOWN_ERROR = "unknown_error"


class FatalCrawlError(Exception):
    """The run cannot continue (browser did not start, main loop crashed)"""


@dataclass
class ErrorInfo:
    """Information about an error occurrence"""
    url: str
    error_type: ErrorType
    status_code: Optional[int]
    message: str
    timestamp: float


class ErrorHandler:
    """Classifies and records per-URL failures

    Failed URLs are never retried: every error is recorded once and the
    crawl moves on.
    """

    def __init__(self):
        self.error_history: List[ErrorInfo] = []
        self.failed_urls: Dict[str, List[ErrorInfo]] = defaultdict(list)

    @staticmethod
    def classify_error(error: Exception) -> ErrorType:
        """Classify an exception raised while processing a page"""
        if isinstance(error, PlaywrightTimeoutError):
            return ErrorType.NAVIGATION_TIMEOUT
        if isinstance(error, PlaywrightError):
            return ErrorType.BROWSER_ERROR
        return ErrorType.UNKNOWN_ERROR

    def record_exception(self, url: str, error: Exception) -> ErrorInfo:
        return self._record(url, self.classify_error(error), None, str(error))

    def record_classified(self, url: str, status_code: int, is_error_page: bool) -> ErrorInfo:
        """Record a page that loaded but was classified as an error"""
        error_type = ErrorType.ERROR_SIGNAL if is_error_page else ErrorType.HTTP_STATUS
        return self._record(url, error_type, status_code, f"Status {status_code}")

    def _record(self, url: str, error_type: ErrorType, status_code: Optional[int],
                message: str) -> ErrorInfo:
        error_info = ErrorInfo(
            url=url,
            error_type=error_type,
            status_code=status_code,
            message=message,
            timestamp=time.time()
        )
        self.error_history.append(error_info)
        self.failed_urls[url].append(error_info)
        logger.debug(f"Recorded {error_type.value} for {url}: {message}")
        return error_info

    def get_error_summary(self) -> Dict[str, Any]:
        """Get summary of all errors encountered"""
        if not self.error_history:
            return {"total_errors": 0}

        error_counts = defaultdict(int)
        for error in self.error_history:
            error_counts[error.error_type.value] += 1

        return {
            "total_errors": len(self.error_history),
            "failed_urls": len(self.failed_urls),
            "error_types": dict(error_counts)
        }

    def get_failed_urls(self) -> List[str]:
        return list(self.failed_urls.keys())
