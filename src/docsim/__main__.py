"""Allow ``python -m docsim``."""

import sys

from docsim.adapters.inbound.cli import main

sys.exit(main())
