"""
Main entry point for the spec_score package.
Allows running the CLI with: python -m spec_score
"""

from .cli import cli_main

if __name__ == "__main__":
    cli_main()
