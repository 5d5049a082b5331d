"""Application commands."""

from easel.actions.action import Action, ActionManager

__all__ = ["Action", "ActionManager"]
