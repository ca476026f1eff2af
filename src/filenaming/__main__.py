"""Allow ``python -m filenaming`` to run the CLI."""

import sys

from filenaming.ui.cli import main

if __name__ == "__main__":
    sys.exit(main())
