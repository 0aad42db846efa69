"""Pulling translations from Transifex into sibling checkouts."""

from .resources import ResourcePuller
from .targets import (
    DesktopTarget,
    GuiTarget,
    PackagerTarget,
    PulledResource,
    TargetReport,
    TargetWriter,
    pull_everything,
)

__all__ = [
    "DesktopTarget",
    "GuiTarget",
    "PackagerTarget",
    "PulledResource",
    "ResourcePuller",
    "TargetReport",
    "TargetWriter",
    "pull_everything",
]
