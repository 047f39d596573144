"""Module entrypoint for ``python -m lazyirc``.

Argument parsing and runtime setup happen in ``lazyirc.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
