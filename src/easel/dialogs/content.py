"""Dialog content: what runs inside a dialog window."""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Iterator
from typing import Any

from loguru import logger

from easel.dialogs.prompts import DialogPrompter
from easel.errors import DialogError, DialogNotFoundError
from easel.ipc import MessageChannel
from easel.windows.window import Window


class DialogContext[P]:
    """Handle given to dialog content running inside its window."""

    def __init__(
        self,
        name: str,
        params: P,
        window: Window,
        channel: MessageChannel[Any],
        prompter: DialogPrompter,
    ) -> None:
        self.name = name
        self.params = params
        self.window = window
        self.prompter = prompter
        self.finished = False
        self._channel = channel

    def ready_show(self, width: int | None = None, height: int | None = None) -> None:
        """Size the window to the rendered content and show it."""
        if width is not None and height is not None:
            self.window.set_content_size(width, height)
        self.window.show()

    def done(self, result: Any) -> None:
        """Hide the window and report `result` to whoever opened the dialog."""
        self.finished = True
        self.window.hide()
        logger.debug("dialog.done name={} window={}", self.name, self.window.id)
        self._channel.send(self.window.contents, result)

    def cancel(self) -> None:
        """Dismiss the dialog without a result."""
        self.finished = True
        logger.debug("dialog.cancel name={} window={}", self.name, self.window.id)
        self.window.close()


type DialogContent = Callable[[DialogContext[Any]], Awaitable[None]]


class DialogRegistry:
    """Dialog contents by name."""

    def __init__(self) -> None:
        self._contents: dict[str, DialogContent] = {}

    def register(self, name: str, content: DialogContent) -> None:
        if name in self._contents:
            raise DialogError(f"dialog already registered: {name}")
        self._contents[name] = content

    def get(self, name: str) -> DialogContent:
        try:
            return self._contents[name]
        except KeyError:
            raise DialogNotFoundError(name) from None

    def names(self) -> list[str]:
        return sorted(self._contents)

    def __contains__(self, name: object) -> bool:
        return name in self._contents

    def __iter__(self) -> Iterator[str]:
        return iter(self.names())

    def __len__(self) -> int:
        return len(self._contents)
