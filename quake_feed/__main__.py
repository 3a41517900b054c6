"""Allow ``python -m quake_feed [minimumMagnitude]``."""

import sys

from quake_feed.cli import main

sys.exit(main())
