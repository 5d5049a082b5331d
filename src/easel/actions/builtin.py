"""Actions that open the built-in dialogs."""

from __future__ import annotations

from easel.actions.action import Action
from easel.dialogs.manager import DialogLauncher
from easel.models.dimension import PictureDimension
from easel.models.export import ExportOptions


class DialogAction(Action):
    def __init__(self, launcher: DialogLauncher) -> None:
        self.launcher = launcher


class NewPictureAction(DialogAction):
    id = "file.new"
    title = "New..."

    async def run(self) -> PictureDimension | None:
        return await self.launcher.open_new_picture_dialog()


class ChangeResolutionAction(DialogAction):
    id = "picture.resolution"
    title = "Change Resolution..."

    async def run(self, current: PictureDimension) -> PictureDimension | None:
        return await self.launcher.open_resolution_change_dialog(current)


class ExportAction(DialogAction):
    id = "file.export"
    title = "Export..."

    async def run(self) -> ExportOptions | None:
        return await self.launcher.open_export_dialog()


def builtin_actions(launcher: DialogLauncher) -> list[Action]:
    return [NewPictureAction(launcher), ChangeResolutionAction(launcher), ExportAction(launcher)]
