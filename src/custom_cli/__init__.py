"""
custom-cli - simple command line commands.

Provides two subcommands:
- ``print-text``: display a line of text passed as an argument
- ``display-file``: print a file on standard output, optionally decorated
  with line numbers, end-of-line markers and visible tabs
"""

__version__ = "0.1.0"
