"""Allow ``python -m copyto``."""

import sys

from copyto.ui.cli import main

if __name__ == "__main__":
    sys.exit(main())
