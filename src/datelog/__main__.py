"""Allow 'python -m datelog'."""

import sys

from datelog.cli import main

sys.exit(main())
