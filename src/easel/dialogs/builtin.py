"""Built-in dialogs: new picture, resolution change, export and tool shortcuts."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from easel.actions import ActionManager
from easel.actions.builtin import builtin_actions
from easel.config import Settings
from easel.dialogs.content import DialogContent, DialogContext, DialogRegistry
from easel.dialogs.prompts import DialogPrompter
from easel.dialogs.manager import DialogLauncher
from easel.errors import DialogError
from easel.hookspecs import hookimpl
from easel.models.dimension import DimensionSelection, PictureDimension
from easel.models.export import EXPORT_FORMATS
from easel.models.shortcut import KeyInput, ToolShortcuts

CUSTOM_SIZE = "custom"
NO_SHORTCUT = "none"


def new_picture_dialog(max_size: int) -> DialogContent:
    async def content(ctx: DialogContext[Any]) -> None:
        selection = DimensionSelection(max_size=max_size)
        prompter = ctx.prompter
        ctx.ready_show()
        choices = [preset.name for preset in selection.presets] + [CUSTOM_SIZE]
        while True:
            choice = await prompter.choose("Size", choices, default=choices[0])
            if choice is None:
                ctx.cancel()
                return
            if choice == CUSTOM_SIZE:
                width = await prompter.ask_number("Width (px)", selection.width_rounded, integer=True)
                if width is None:
                    ctx.cancel()
                    return
                height = await prompter.ask_number("Height (px)", selection.height_rounded, integer=True)
                if height is None:
                    ctx.cancel()
                    return
                dpi = await prompter.ask_number("Resolution (dpi)", selection.dpi)
                if dpi is None:
                    ctx.cancel()
                    return
                selection.unit = "px"
                selection.keep_ratio = False
                selection.dpi = float(dpi)
                selection.change_size(width, height)
            else:
                selection.set_preset(choices.index(choice))
            if selection.is_valid:
                ctx.done(selection.dimension)
                return
            prompter.notify(f"Width and height must be between 1 and {max_size} pixels.")

    return content


def resolution_change_dialog(max_size: int) -> DialogContent:
    async def content(ctx: DialogContext[Any]) -> None:
        selection = DimensionSelection(_as_dimension(ctx.params), max_size=max_size)
        selection.unit = "percent"
        prompter = ctx.prompter
        ctx.ready_show()
        while True:
            keep_ratio = await prompter.confirm("Keep aspect ratio", default=selection.keep_ratio)
            if keep_ratio is None:
                ctx.cancel()
                return
            selection.keep_ratio = keep_ratio
            width = await prompter.ask_number("Width (%)", selection.width_in_unit)
            if width is None:
                ctx.cancel()
                return
            height = None
            if not keep_ratio:
                height = await prompter.ask_number("Height (%)", selection.height_in_unit)
                if height is None:
                    ctx.cancel()
                    return
            dpi = await prompter.ask_number("Resolution (dpi)", selection.dpi)
            if dpi is None:
                ctx.cancel()
                return
            selection.change_size(width, height)
            selection.change_dpi(dpi)
            if selection.is_valid:
                ctx.done(selection.dimension)
                return
            prompter.notify(f"Width and height must be between 1 and {max_size} pixels.")

    return content


async def export_dialog(ctx: DialogContext[Any]) -> None:
    ctx.ready_show()
    choice = await ctx.prompter.choose("Format", EXPORT_FORMATS, default=EXPORT_FORMATS[0])
    if choice is None:
        ctx.cancel()
        return
    ctx.done({"format": choice})


async def tool_shortcuts_dialog(ctx: DialogContext[Any]) -> None:
    current = _as_shortcuts(ctx.params)
    ctx.ready_show()
    answered, shortcut = await _ask_shortcut(ctx.prompter, "Shortcut", current.shortcut)
    if not answered:
        ctx.cancel()
        return
    answered, temp_shortcut = await _ask_shortcut(ctx.prompter, "Temp Shortcut", current.temp_shortcut)
    if not answered:
        ctx.cancel()
        return
    ctx.done(ToolShortcuts(shortcut, temp_shortcut))


async def _ask_shortcut(prompter: DialogPrompter, label: str, current: KeyInput | None) -> tuple[bool, KeyInput | None]:
    """Returns (answered, shortcut). `none` clears the shortcut."""
    default = str(current) if current is not None else NO_SHORTCUT
    while True:
        answer = await prompter.ask_text(label, default)
        if answer is None:
            return False, None
        if answer.strip().lower() == NO_SHORTCUT:
            return True, None
        try:
            return True, KeyInput.parse(answer)
        except ValueError as exc:
            prompter.notify(str(exc))


def _as_dimension(params: Any) -> PictureDimension:
    if isinstance(params, PictureDimension):
        return params
    if isinstance(params, Mapping) and "width" in params and "height" in params:
        return PictureDimension(int(params["width"]), int(params["height"]), float(params.get("dpi", 72)))
    raise DialogError("resolutionChange needs the current picture width and height")


def _as_shortcuts(params: Any) -> ToolShortcuts:
    if params is None:
        return ToolShortcuts()
    if isinstance(params, ToolShortcuts):
        return params
    if isinstance(params, Mapping):
        return ToolShortcuts.from_payload(params)
    raise DialogError("toolShortcuts expects the current shortcuts")


@hookimpl
def register_dialogs(registry: DialogRegistry, settings: Settings) -> None:
    registry.register("newPicture", new_picture_dialog(settings.max_picture_size))
    registry.register("resolutionChange", resolution_change_dialog(settings.max_picture_size))
    registry.register("export", export_dialog)
    registry.register("toolShortcuts", tool_shortcuts_dialog)


@hookimpl
def register_actions(actions: ActionManager, launcher: DialogLauncher) -> None:
    actions.add(*builtin_actions(launcher))
