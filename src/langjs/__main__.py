"""Allow ``python -m langjs``."""

import sys

from langjs.cli import main

sys.exit(main())
