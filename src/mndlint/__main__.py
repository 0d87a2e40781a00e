import sys

from mndlint.cli import main

sys.exit(main())
