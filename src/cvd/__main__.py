"""Allow ``python -m cvd``."""

import sys

from cvd.adapters.inbound.cli import main

sys.exit(main())
