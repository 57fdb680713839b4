"""Allow ``python -m cuid2``."""

import sys

from cuid2.cli import main

if __name__ == "__main__":
    sys.exit(main())
