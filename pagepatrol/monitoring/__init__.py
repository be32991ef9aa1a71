"""
Monitoring and observability modules
"""

from .log_manager import LogManager
from .run_metrics import RunMetrics

__all__ = [
    'LogManager',
    'RunMetrics'
]
