"""Allow running as ``python -m optscan``."""

import sys

from optscan.cli.main import main

if __name__ == "__main__":
    sys.exit(main())
