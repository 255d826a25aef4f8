"""
dream_cli: Command-line driver for the pipe dream engine.

Modules:
- main.py: Argument parsing, generation and printing
- utils.py: Logger setup and JSON run receipts
"""

from .main import main

__all__ = ["main"]
