"""Entry point for running readme_slicer as a module.

Usage:
    python -m readme_slicer <command> [options]
"""
from .cli import main

if __name__ == "__main__":
    raise SystemExit(main())
