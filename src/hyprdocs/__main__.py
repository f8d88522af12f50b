"""Run hyprdocs as a module."""

import sys

from hyprdocs.cli import main

sys.exit(main())
