"""Allow ``python -m wrapdoc``."""

import sys

from wrapdoc.cli import main

sys.exit(main())
