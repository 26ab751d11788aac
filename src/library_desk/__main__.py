"""Allow ``python -m library_desk``."""

import sys

from .cli import main

sys.exit(main())
