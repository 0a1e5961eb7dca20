"""Module entrypoint for running doccomment as ``python -m doccomment``."""

from __future__ import annotations

from doccomment.cli import main


if __name__ == "__main__":
    main()
