"""Allow ``python -m cyclecheck``."""

import sys

from cyclecheck.cli import main

sys.exit(main())
