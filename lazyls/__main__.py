"""Module entrypoint for ``python -m lazyls``."""

from .cli import main


if __name__ == "__main__":
    main()
