"""Run the html2md command with ``python -m html2md page.html``."""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())
