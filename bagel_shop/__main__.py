"""
Main entry point for running bagel_shop as a module.

This allows the package to be run with: python -m bagel_shop
"""

from .src.cli import main

if __name__ == '__main__':
    main()
