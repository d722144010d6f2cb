"""
Main entry point for running bsvwrap as a module.

Enables running: python -m bsvwrap
"""

from .cli import main

if __name__ == '__main__':
    main()
