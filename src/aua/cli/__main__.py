"""Entry point for running the CLI as a module.

Usage:
    python -m aua.cli --help
"""

from aua.cli.main import app

if __name__ == "__main__":
    app()
