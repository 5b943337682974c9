"""Allow ``python -m lrcphile``."""

import sys

from lrcphile.ui.cli.cli import main

if __name__ == "__main__":
    sys.exit(main())
