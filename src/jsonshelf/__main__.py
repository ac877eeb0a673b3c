"""Allow ``python -m jsonshelf``."""

from jsonshelf.cli import main

main()
