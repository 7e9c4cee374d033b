"""Command-line interface."""
import sys

from goldenratio.main import main


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
