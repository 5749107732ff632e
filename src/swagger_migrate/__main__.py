"""
Entry point for module execution (``python -m swagger_migrate``).

This module delegates execution to the CLI handler in ``swagger_migrate.cli.__main__``.
"""

import sys
from swagger_migrate.cli.__main__ import main

if __name__ == "__main__":
  sys.exit(main())
