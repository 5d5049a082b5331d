"""Pluggy hook namespace and plugin hook specifications."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pluggy

if TYPE_CHECKING:
    from easel.actions import ActionManager
    from easel.config import Settings
    from easel.dialogs.content import DialogRegistry
    from easel.dialogs.manager import DialogLauncher

EASEL_HOOK_NAMESPACE = "easel"
hookspec = pluggy.HookspecMarker(EASEL_HOOK_NAMESPACE)
hookimpl = pluggy.HookimplMarker(EASEL_HOOK_NAMESPACE)


class EaselHookSpecs:
    """Hook contract for easel extensions."""

    @hookspec
    def register_dialogs(self, registry: DialogRegistry, settings: Settings) -> None:
        """Register dialog contents by name."""

    @hookspec
    def register_actions(self, actions: ActionManager, launcher: DialogLauncher) -> None:
        """Register actions, usually ones that open dialogs through `launcher`."""
