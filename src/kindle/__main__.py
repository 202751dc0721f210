"""Main entry point for python -m kindle."""

from kindle.cli.main import main


if __name__ == "__main__":
    main()
