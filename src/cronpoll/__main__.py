"""``python -m cronpoll``."""

import sys

from .main import main

sys.exit(main())
