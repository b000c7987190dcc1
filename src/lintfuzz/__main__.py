"""Allow ``python -m lintfuzz``."""

import sys

from lintfuzz.cli import main

sys.exit(main())
