"""Entry point for ``python -m recent_work``."""

import sys

from recent_work.cli import main

if __name__ == "__main__":
    sys.exit(main())
