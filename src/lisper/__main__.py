"""Entry point for ``python -m lisper``."""

from lisper.cli import main

if __name__ == "__main__":
    main()
