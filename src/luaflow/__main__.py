"""Allow ``python -m luaflow <path>``."""

import sys

from luaflow.cli import main

sys.exit(main())
