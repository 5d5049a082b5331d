"""One dialog window, one result."""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, Literal

from loguru import logger

from easel.dialogs.outcome import Outcome, Resolved, ResolvedEmpty, SettlementCell
from easel.errors import DialogLoadError, DialogTimeoutError
from easel.ipc import Message, MessageChannel, Subscription
from easel.windows.window import Window, WindowOptions

if TYPE_CHECKING:
    from easel.windows.host import WindowHost

type SessionState = Literal["opening", "awaiting_response", "resolved", "resolved_empty", "failed", "disposed"]


class DialogSession[T]:
    """Opens a dialog window and waits for exactly one outcome.

    A result message from this window's content and the window's closed
    notification race; whichever the event loop delivers first settles the
    session and the other becomes a no-op. Load failure, the optional
    timeout and `abort()` settle through the same cell.
    """

    def __init__(
        self,
        name: str,
        host: WindowHost,
        channel: MessageChannel[Any],
        options: WindowOptions | None = None,
    ) -> None:
        self._name = name
        self._host = host
        self._channel = channel
        self._options = options or WindowOptions()
        self.window: Window | None = None
        self.state: SessionState = "opening"
        self.closed_by_user = False
        self._cell: SettlementCell[T] | None = None
        self._outcome: Outcome[T] | None = None

    def __repr__(self) -> str:
        window_id = self.window.id if self.window is not None else None
        return f"<DialogSession name={self._name} window={window_id} state={self.state}>"

    @property
    def name(self) -> str:
        return self._name

    @property
    def outcome(self) -> Outcome[T] | None:
        return self._outcome

    @property
    def settled(self) -> bool:
        return self._cell is not None and self._cell.settled

    async def run(self, params: Any = None, *, timeout: float | None = None) -> Outcome[T]:
        """Open the window, wait for the outcome, then tear everything down."""
        if self._cell is not None:
            raise RuntimeError(f"dialog session {self._name} already ran")
        cell: SettlementCell[T] = SettlementCell()
        self._cell = cell

        window = self._host.create_window(self._options)
        window.remove_menu()
        self.window = window
        logger.info("dialog.open name={} window={}", self._name, window.id)

        subscription: Subscription | None = None
        disconnects: list[Callable[[], None]] = []
        try:
            self._host.load(window, self._name, params)
            subscription = self._channel.subscribe(
                lambda message: message.sender == window.contents,
                self._on_result,
            )
            disconnects.append(window.on_closed(self._on_closed))
            disconnects.append(window.on_load_failed(self._on_load_failed))
            self.state = "awaiting_response"
            outcome = await self._wait(cell, timeout)
        except asyncio.CancelledError:
            if self._settle(ResolvedEmpty("aborted")):
                logger.info("dialog.cancelled name={} window={}", self._name, window.id)
            raise
        except Exception:
            self.state = "failed"
            raise
        finally:
            if subscription is not None:
                subscription.unsubscribe()
            for disconnect in disconnects:
                disconnect()
            if not self.closed_by_user and not window.is_closed:
                window.close()
            self._dispose()

        logger.info("dialog.settled name={} window={} outcome={}", self._name, window.id, type(outcome).__name__)
        return outcome

    def abort(self) -> bool:
        """Settle the session without a result, as if the opener gave up."""
        return self._settle(ResolvedEmpty("aborted"))

    async def _wait(self, cell: SettlementCell[T], timeout: float | None) -> Outcome[T]:
        if timeout is None:
            return await cell.wait()
        try:
            return await asyncio.wait_for(cell.wait(), timeout)
        except TimeoutError:
            if cell.try_fail(DialogTimeoutError(self._name, timeout)):
                logger.warning("dialog.timeout name={} timeout={}", self._name, timeout)
            return await cell.wait()

    def _settle(self, outcome: Outcome[T]) -> bool:
        if self._cell is None or not self._cell.try_settle(outcome):
            return False
        self._outcome = outcome
        self.state = "resolved" if isinstance(outcome, Resolved) else "resolved_empty"
        return True

    def _on_result(self, message: Message[T]) -> None:
        if self._settle(Resolved(message.payload)):
            logger.debug("dialog.result name={} sender={}", self._name, message.sender)

    def _on_closed(self, window: Window) -> None:
        if self._settle(ResolvedEmpty("closed")):
            self.closed_by_user = True
            logger.debug("dialog.closed_by_user name={} window={}", self._name, window.id)

    def _on_load_failed(self, window: Window, error: BaseException) -> None:
        if self._cell is not None and self._cell.try_fail(DialogLoadError(self._name, error)):
            logger.debug("dialog.load_failed name={} window={}", self._name, window.id)

    def _dispose(self) -> None:
        if self.state in ("resolved", "resolved_empty", "failed"):
            self.state = "disposed"
