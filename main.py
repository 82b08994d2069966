"""
Run the built-in page replacement trials.

    python main.py                       # FIFO and LRU at RSS 3, 5, 7
    python main.py --pages 7,0,1,2,0,3 -c 3
    python main.py --no-trace -v
"""

import sys

from pagesim.cli import main

if __name__ == "__main__":
    sys.exit(main())
