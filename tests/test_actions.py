from __future__ import annotations

import pytest

from easel.actions import Action, ActionManager
from easel.actions.builtin import builtin_actions
from easel.dialogs.builtin import register_dialogs
from easel.dialogs.manager import DialogLauncher, DialogManager
from easel.dialogs.prompts import ScriptedPrompter
from easel.errors import ActionDisabledError, ActionNotFoundError
from easel.models.dimension import PictureDimension
from easel.models.export import ExportOptions
from easel.windows.host import WindowHost


class Echo(Action):
    id = "test.echo"
    title = "Echo"

    def run(self, *args):
        return args


class Disabled(Action):
    id = "test.disabled"
    title = "Disabled"

    @property
    def enabled(self) -> bool:
        return False

    def run(self, *args):
        raise AssertionError("disabled actions must not run")


class Nameless(Action):
    def run(self, *args):
        return None


@pytest.mark.asyncio
async def test_manager_runs_sync_actions() -> None:
    actions = ActionManager()
    actions.add(Echo())

    assert "test.echo" in actions
    assert await actions.run("test.echo", 1, 2) == (1, 2)


@pytest.mark.asyncio
async def test_manager_rejects_unknown_and_disabled() -> None:
    actions = ActionManager()
    actions.add(Disabled())

    with pytest.raises(ActionNotFoundError):
        await actions.run("test.missing")
    with pytest.raises(ActionDisabledError):
        await actions.run("test.disabled")


def test_manager_requires_an_id() -> None:
    with pytest.raises(ValueError):
        ActionManager().add(Nameless())


def test_manager_iterates_sorted_by_id() -> None:
    actions = ActionManager()
    actions.add(Echo(), Disabled())

    assert actions.ids() == ["test.disabled", "test.echo"]
    assert [action.id for action in actions] == ["test.disabled", "test.echo"]


@pytest.fixture
def launcher_for(hub, registry, settings):
    register_dialogs(registry, settings)

    def _launcher(*answers: object) -> DialogLauncher:
        host = WindowHost(hub, registry, ScriptedPrompter(answers))
        return DialogLauncher(DialogManager(host, settings))

    return _launcher


@pytest.mark.asyncio
async def test_builtin_actions_open_dialogs(launcher_for) -> None:
    actions = ActionManager()
    actions.add(*builtin_actions(launcher_for("A6", "bmp")))

    assert actions.ids() == ["file.export", "file.new", "picture.resolution"]
    assert await actions.run("file.new") == PictureDimension(595, 839, 144)
    assert await actions.run("file.export") == ExportOptions("bmp")


@pytest.mark.asyncio
async def test_change_resolution_action_passes_current_size(launcher_for) -> None:
    actions = ActionManager()
    actions.add(*builtin_actions(launcher_for("", 200, "")))

    assert await actions.run("picture.resolution", PictureDimension(10, 20)) == PictureDimension(20, 40, 72)


@pytest.mark.asyncio
async def test_dismissed_dialog_action_returns_none(launcher_for) -> None:
    actions = ActionManager()
    actions.add(*builtin_actions(launcher_for()))

    assert await actions.run("file.export") is None
