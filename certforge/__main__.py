"""Allow running CertForge with ``python -m certforge``."""

import sys

from certforge.cli import main

if __name__ == "__main__":
    sys.exit(main())
