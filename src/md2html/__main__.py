"""Module entry point for ``python -m md2html``."""

import sys

from md2html.cli import main

if __name__ == "__main__":
    sys.exit(main())
