"""Allow ``python -m rgrep``."""

from rgrep.cli.main import main

main()
