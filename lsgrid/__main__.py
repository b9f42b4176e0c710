"""Module entrypoint for ``python -m lsgrid``.

This keeps module-mode execution behavior identical to the console script.
All argument parsing and listing happen in ``lsgrid.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
