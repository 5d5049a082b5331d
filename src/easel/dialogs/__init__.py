"""Modal dialogs: open a child window, await one typed result."""

from easel.dialogs.content import DialogContent, DialogContext, DialogRegistry
from easel.dialogs.manager import DialogLauncher, DialogManager
from easel.dialogs.outcome import Outcome, Resolved, ResolvedEmpty, SettlementCell
from easel.dialogs.prompts import ConsolePrompter, DialogPrompter, ScriptedPrompter
from easel.dialogs.session import DialogSession, SessionState

__all__ = [
    "ConsolePrompter",
    "DialogContent",
    "DialogContext",
    "DialogLauncher",
    "DialogManager",
    "DialogPrompter",
    "DialogRegistry",
    "DialogSession",
    "Outcome",
    "Resolved",
    "ResolvedEmpty",
    "ScriptedPrompter",
    "SessionState",
    "SettlementCell",
]
