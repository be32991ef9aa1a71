#!/usr/bin/env python3
"""
PagePatrol
Crawls a site from seed URLs and checks headings, og:image, error text and status
"""

import sys
from pagepatrol.cli import main

if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        print("\nCrawler stopped by user")
        sys.exit(130)
