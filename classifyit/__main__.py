"""Allow ``python -m classifyit``."""

import sys

from .main import main

sys.exit(main())
