"""Module entrypoint for ``python -m linkhint``.

All argument parsing and terminal setup happen in ``linkhint.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
