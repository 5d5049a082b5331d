"""Opening dialogs from the parent side."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from easel.config import Settings
from easel.dialogs.outcome import Outcome, Resolved
from easel.dialogs.session import DialogSession
from easel.errors import DialogNotFoundError
from easel.models.dimension import PictureDimension
from easel.models.export import ExportOptions
from easel.models.shortcut import ToolShortcuts
from easel.windows.window import WindowOptions

if TYPE_CHECKING:
    from easel.windows.host import WindowHost


class DialogManager:
    """Runs dialog sessions against one window host.

    Any number of sessions may be open at once; they share the hub's dialog
    channel and are kept apart by their windows' identities.
    """

    def __init__(self, host: WindowHost, settings: Settings | None = None) -> None:
        self.host = host
        self.settings = settings or Settings()
        self._sessions: set[DialogSession[Any]] = set()

    @property
    def active_sessions(self) -> list[DialogSession[Any]]:
        return list(self._sessions)

    def window_options(self, name: str) -> WindowOptions:
        return WindowOptions(
            width=self.settings.dialog_width,
            height=self.settings.dialog_height,
            show=False,
            menu=False,
            title=name,
        )

    async def open(self, name: str, params: Any = None, *, timeout: float | None = None) -> Outcome[Any]:
        """Open dialog `name` and wait for its result or its dismissal.

        Raises:
            DialogNotFoundError: no content is registered under `name`.
            DialogLoadError: the content failed before producing a result.
            DialogTimeoutError: `timeout` (or the configured default) elapsed.
        """
        if name not in self.host.registry:
            raise DialogNotFoundError(name)
        if timeout is None:
            timeout = self.settings.dialog_timeout_seconds
        session: DialogSession[Any] = DialogSession(
            name,
            self.host,
            self.host.hub.dialog_done,
            self.window_options(name),
        )
        self._sessions.add(session)
        try:
            return await session.run(params, timeout=timeout)
        finally:
            self._sessions.discard(session)

    def abort_all(self) -> int:
        """Settle every open session without a result. Returns how many were aborted."""
        return sum(1 for session in list(self._sessions) if session.abort())


class DialogLauncher:
    """Typed entry points for the built-in dialogs."""

    def __init__(self, manager: DialogManager) -> None:
        self.manager = manager

    async def open_new_picture_dialog(self) -> PictureDimension | None:
        return _value_or_none(await self.manager.open("newPicture"))

    async def open_resolution_change_dialog(self, init: PictureDimension) -> PictureDimension | None:
        return _value_or_none(await self.manager.open("resolutionChange", init))

    async def open_export_dialog(self) -> ExportOptions | None:
        payload = _value_or_none(await self.manager.open("export"))
        if payload is None:
            return None
        return ExportOptions.from_payload(payload)

    async def open_tool_shortcuts_dialog(self, init: ToolShortcuts) -> ToolShortcuts | None:
        return _value_or_none(await self.manager.open("toolShortcuts", init))


def _value_or_none(outcome: Outcome[Any]) -> Any:
    if isinstance(outcome, Resolved):
        return outcome.value
    return None
