"""Allow `python -m inlineref`."""

import sys

from inlineref.cli import main

if __name__ == "__main__":
    sys.exit(main())
