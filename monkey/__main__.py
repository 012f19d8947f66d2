"""
Allow running the interpreter with ``python -m monkey``.
"""
import sys

from monkey.cli import main

if __name__ == "__main__":
    sys.exit(main())
