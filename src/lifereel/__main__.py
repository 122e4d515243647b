"""Allow ``python -m lifereel``."""

import sys

from .frontends.cli import main

sys.exit(main())
