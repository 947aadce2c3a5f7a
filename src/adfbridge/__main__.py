"""Allow ``python -m adfbridge``."""

import sys

from .cli import main

sys.exit(main())
