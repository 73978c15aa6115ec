"""Command-line interface."""
import sys

from skatemechanics.main import main

if __name__ == "__main__":
    sys.exit(main())
