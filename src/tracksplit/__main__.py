"""Allow ``python -m tracksplit``."""

import sys

from tracksplit.ui.cli import main

if __name__ == "__main__":
    sys.exit(main())
