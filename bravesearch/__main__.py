"""
Entry point for running bravesearch as a module: python -m bravesearch
"""

from bravesearch.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
