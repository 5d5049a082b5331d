"""easel - dialog shell for a desktop painting application."""

from easel.app import EaselApp
from easel.dialogs import DialogLauncher, DialogManager, Outcome, Resolved, ResolvedEmpty

__version__ = "0.1.0"

__all__ = ["DialogLauncher", "DialogManager", "EaselApp", "Outcome", "Resolved", "ResolvedEmpty"]
