"""CLI module for the Arcaea Unlimited API client.

Usage:
    python -m aua.cli --help
    python -m aua.cli --base-url https://aua.example/v5 song info "Fracture Ray"
    python -m aua.cli assets icon 0 --awakened -o icon.png
"""

from aua.cli.main import app

__all__ = ["app"]
