"""Entry point for ``python -m clone_cli``."""

from .cli import main

if __name__ == "__main__":
    main()
