"""Allow ``python -m teapath``."""

import sys

from teapath.ui.cli import main

if __name__ == "__main__":
    sys.exit(main())
