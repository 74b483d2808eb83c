#!/usr/bin/env python3
"""
Statwatch
Polls a server's statistics endpoint and prints a line whenever load,
memory, disk or network usage crosses its threshold
"""

import sys
from statwatch.runner import main

if __name__ == "__main__":
    sys.exit(main())
