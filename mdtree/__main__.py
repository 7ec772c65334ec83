"""Module entrypoint for ``python -m mdtree``.

All argument parsing and runtime setup happen in ``mdtree.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
