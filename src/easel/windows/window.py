"""Child windows and their lifecycle notifications."""

from __future__ import annotations

import asyncio
import itertools
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from blinker import Signal
from loguru import logger

_window_ids = itertools.count(1)


@dataclass(frozen=True)
class WindowOptions:
    """Geometry and chrome of a new window."""

    width: int = 400
    height: int = 200
    show: bool = False
    menu: bool = False
    title: str = ""


@dataclass(frozen=True)
class ContentHandle:
    """Identity of the content running in one window.

    Messages carry this handle as their sender so a parent can tell which
    window emitted them.
    """

    window_id: int


class Window:
    """A window hosting one piece of content.

    The closed notification fires exactly once, from the event loop, after
    the first `close()` call. `is_closed` flips immediately.
    """

    def __init__(self, options: WindowOptions, window_id: int | None = None) -> None:
        self.id = window_id if window_id is not None else next(_window_ids)
        self.options = options
        self.contents = ContentHandle(self.id)
        self.size = (options.width, options.height)
        self.visible = options.show
        self.menu_enabled = options.menu
        self._closed = False
        self._closed_signal = Signal(f"window.{self.id}.closed")
        self._load_failed_signal = Signal(f"window.{self.id}.load_failed")
        self._content_task: asyncio.Task[None] | None = None

    def __repr__(self) -> str:
        state = "closed" if self._closed else ("visible" if self.visible else "hidden")
        return f"<Window id={self.id} {state}>"

    @property
    def is_closed(self) -> bool:
        return self._closed

    def show(self) -> None:
        if not self._closed:
            self.visible = True

    def hide(self) -> None:
        self.visible = False

    def set_content_size(self, width: int, height: int) -> None:
        self.size = (round(width), round(height))

    def remove_menu(self) -> None:
        self.menu_enabled = False

    def on_closed(self, handler: Callable[[Window], None]) -> Callable[[], None]:
        def _receiver(sender: Window) -> None:
            handler(sender)

        self._closed_signal.connect(_receiver, weak=False)
        return lambda: self._closed_signal.disconnect(_receiver)

    def on_load_failed(self, handler: Callable[[Window, BaseException], None]) -> Callable[[], None]:
        def _receiver(sender: Window, *, error: BaseException) -> None:
            handler(sender, error)

        self._load_failed_signal.connect(_receiver, weak=False)
        return lambda: self._load_failed_signal.disconnect(_receiver)

    def attach_content(self, task: asyncio.Task[None]) -> None:
        self._content_task = task
        task.add_done_callback(self._content_finished)

    def close(self) -> bool:
        """Close the window. Returns False if it was already closed."""
        if self._closed:
            return False
        self._closed = True
        self.visible = False
        if self._content_task is not None and not self._content_task.done():
            self._content_task.cancel()
        logger.debug("window.close id={}", self.id)
        self._notify(self._emit_closed)
        return True

    def report_load_failure(self, error: BaseException) -> None:
        if self._closed:
            return
        logger.opt(exception=error).warning("window.load_failed id={}", self.id)
        self._notify(self._emit_load_failed, error)

    def _emit_closed(self) -> None:
        self._closed_signal.send(self)

    def _emit_load_failed(self, error: BaseException) -> None:
        # A failure queued before close is stale once the window is gone.
        if self._closed:
            return
        self._load_failed_signal.send(self, error=error)

    def _content_finished(self, task: asyncio.Task[None]) -> None:
        if task.cancelled():
            return
        error = task.exception()
        if error is not None:
            self.report_load_failure(error)

    @staticmethod
    def _notify(callback: Callable[..., Any], *args: Any, **kwargs: Any) -> None:
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            callback(*args, **kwargs)
            return
        loop.call_soon(lambda: callback(*args, **kwargs))
