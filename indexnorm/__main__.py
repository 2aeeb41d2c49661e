"""Module entrypoint for running indexnorm as ``python -m indexnorm``."""

from __future__ import annotations

from indexnorm.cli import main


if __name__ == "__main__":
    main()
