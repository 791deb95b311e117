"""Module entrypoint for ``python -m dirsize``.

This keeps module-mode execution behavior identical to the CLI script.
All argument parsing and walk setup happen in ``dirsize.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
