"""Module entrypoint for running rawtext as ``python -m rawtext``."""

from __future__ import annotations

from rawtext.cli import main


if __name__ == "__main__":
    main()
