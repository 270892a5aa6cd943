"""Entry point for `python -m edgeassoc`."""

from edgeassoc.cli import main

main()
