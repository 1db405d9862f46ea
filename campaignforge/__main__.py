"""
Main entry point for the campaignforge package when executed as a module.

This allows running the package with `python -m campaignforge`.
"""

from campaignforge.cli import main

if __name__ == '__main__':
    main()
