"""
Allow running the CLI as a module: python -m iplog_analyzer.cli
"""

import sys
from .analyzer import main

if __name__ == "__main__":
    sys.exit(main())
