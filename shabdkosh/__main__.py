"""Entry point for ``python -m shabdkosh``."""

from .cli import main

if __name__ == "__main__":
    main()
