"""Allow ``python -m ccscan``."""

from .cli import main

main()
