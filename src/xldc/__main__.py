"""
xldc CLI entry point.

Usage:
    python -m xldc verify
    python -m xldc metadata type
    python -m xldc repository get Environments/dev
"""

from xldc.cli import main

if __name__ == "__main__":
    main()
