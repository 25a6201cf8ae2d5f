"""Allow running gwt with python -m gwt."""

import sys

from gwt.cli.main import main

sys.exit(main())
