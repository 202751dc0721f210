"""Allow running the CLI with python -m kindle.cli."""

from kindle.cli.main import main


if __name__ == "__main__":
    main()
