"""Module entrypoint for ``python -m rats``."""

from .cli import main


if __name__ == "__main__":
    main()
