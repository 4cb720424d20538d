"""Allow ``python -m transync``."""

import sys

from transync.cli import main

sys.exit(main())
