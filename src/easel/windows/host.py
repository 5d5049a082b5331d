"""Window creation and content loading."""

from __future__ import annotations

import asyncio
from typing import Any

from loguru import logger

from easel.dialogs.content import DialogContent, DialogContext, DialogRegistry
from easel.dialogs.prompts import DialogPrompter, ScriptedPrompter
from easel.errors import DialogError, DialogNotFoundError
from easel.ipc import ChannelHub
from easel.windows.window import Window, WindowOptions


class WindowHost:
    """Creates windows and runs dialog content inside them.

    Content runs as its own task on the event loop and talks back to the
    opener only through the hub's dialog channel. Content that returns
    without calling `done()` or `cancel()` is reported as a load failure.
    """

    def __init__(
        self,
        hub: ChannelHub,
        registry: DialogRegistry,
        prompter: DialogPrompter | None = None,
    ) -> None:
        self.hub = hub
        self.registry = registry
        self.prompter: DialogPrompter = prompter if prompter is not None else ScriptedPrompter()
        self._windows: dict[int, Window] = {}

    @property
    def windows(self) -> list[Window]:
        return list(self._windows.values())

    def create_window(self, options: WindowOptions | None = None) -> Window:
        window = Window(options or WindowOptions())
        self._windows[window.id] = window
        window.on_closed(self._forget)
        logger.debug("window.create id={} size={}x{}", window.id, *window.size)
        return window

    def load(self, window: Window, name: str, params: Any = None) -> None:
        """Start loading dialog `name` into `window` without waiting for it."""
        try:
            content = self.registry.get(name)
        except DialogNotFoundError as exc:
            window.report_load_failure(exc)
            return
        context: DialogContext[Any] = DialogContext(name, params, window, self.hub.dialog_done, self.prompter)
        task = asyncio.get_running_loop().create_task(
            self._run_content(content, context),
            name=f"dialog:{name}:{window.id}",
        )
        window.attach_content(task)

    def close_all(self) -> None:
        for window in self.windows:
            window.close()

    async def _run_content(self, content: DialogContent, context: DialogContext[Any]) -> None:
        logger.debug("dialog.load name={} window={}", context.name, context.window.id)
        await content(context)
        if not context.finished:
            raise DialogError(f"dialog {context.name} finished without a result")

    def _forget(self, window: Window) -> None:
        self._windows.pop(window.id, None)
