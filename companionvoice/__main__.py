"""Module entrypoint for running the CLI as ``python -m companionvoice``."""

from __future__ import annotations

from companionvoice.cli import main


if __name__ == "__main__":
    main()
