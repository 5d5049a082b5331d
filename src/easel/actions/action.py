"""Command descriptors invoked by menus, shortcuts and the CLI."""

from __future__ import annotations

import inspect
from abc import ABC, abstractmethod
from collections.abc import Iterator
from typing import Any

from loguru import logger

from easel.errors import ActionDisabledError, ActionNotFoundError


class Action(ABC):
    """One user-facing command."""

    id: str = ""
    title: str = ""

    @property
    def enabled(self) -> bool:
        return True

    @abstractmethod
    def run(self, *args: Any) -> Any:
        """Invoke the command. May return an awaitable."""

    def __repr__(self) -> str:
        return f"<{type(self).__name__} id={self.id}>"


class ActionManager:
    """Actions by id."""

    def __init__(self) -> None:
        self._actions: dict[str, Action] = {}

    def add(self, *actions: Action) -> None:
        for action in actions:
            if not action.id:
                raise ValueError(f"{type(action).__name__} has no id")
            self._actions[action.id] = action

    def get(self, action_id: str) -> Action:
        try:
            return self._actions[action_id]
        except KeyError:
            raise ActionNotFoundError(f"unknown action: {action_id}") from None

    def ids(self) -> list[str]:
        return sorted(self._actions)

    def __iter__(self) -> Iterator[Action]:
        return iter(self._actions[action_id] for action_id in self.ids())

    def __contains__(self, action_id: object) -> bool:
        return action_id in self._actions

    async def run(self, action_id: str, *args: Any) -> Any:
        action = self.get(action_id)
        if not action.enabled:
            raise ActionDisabledError(f"action is disabled: {action_id}")
        logger.debug("action.run id={}", action_id)
        result = action.run(*args)
        if inspect.isawaitable(result):
            result = await result
        return result
