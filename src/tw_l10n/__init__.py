"""
tw-l10n-sync - Synchronizes TurboWarp translations with Transifex.
"""

from .cli import pull_main, push_main

__version__ = "1.0.0"

__all__ = ["__version__", "pull_main", "push_main"]
