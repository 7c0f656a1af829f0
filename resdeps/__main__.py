"""Main entry point for resdeps package."""

import sys

from resdeps.cli.main import cli


def main():
    """Main function for resdeps."""
    try:
        return cli()
    except KeyboardInterrupt:
        return 130


if __name__ == "__main__":
    sys.exit(main())
