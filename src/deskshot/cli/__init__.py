"""deskshot Command Line Interface.

Usage:
    python -m deskshot.cli --help
    python -m deskshot.cli -m 0 monitor0.png
    python -m deskshot.cli --stdout | feh -

Or via the installed entry point:
    deskshot --help
"""

from .main import main

__all__ = ["main"]
