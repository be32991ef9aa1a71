"""
PagePatrol - browser-driven site crawler with page quality checks
"""

__version__ = "0.1.0"
