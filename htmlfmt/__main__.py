"""Allow ``python -m htmlfmt``."""

import sys

from .cli import main

main(sys.argv[1:])
