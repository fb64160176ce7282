"""Entry point for ``python -m geoworld``."""

import sys

from geoworld.cli import main

if __name__ == "__main__":
    sys.exit(main())
