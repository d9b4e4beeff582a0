"""Allow ``python -m graphsh``."""

import sys

from graphsh.cli import main

sys.exit(main())
