"""CLI entry point for validstr.

Usage:
    python -m validstr [options] {match,check} ...

Example:
    python -m validstr match r red green blue
    python -m validstr check options.yaml --set color=g
    python -m validstr --verbose check options.yaml
"""

from .runner import main
import sys

if __name__ == '__main__':
    sys.exit(main())
