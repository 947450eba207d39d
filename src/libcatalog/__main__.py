"""Main entry point for the libcatalog package."""

from libcatalog.cli import main


if __name__ == "__main__":
    main()
