"""
Utility helpers for timestamps and file naming
"""

from .timestamps import formatted_timestamp, generate_filename

__all__ = [
    'formatted_timestamp',
    'generate_filename'
]
