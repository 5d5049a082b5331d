from __future__ import annotations

import asyncio

import pytest

from easel.config import Settings
from easel.dialogs.content import DialogRegistry
from easel.dialogs.manager import DialogManager
from easel.dialogs.prompts import ScriptedPrompter
from easel.ipc import ChannelHub
from easel.windows.host import WindowHost


async def _drain(turns: int = 5) -> None:
    for _ in range(turns):
        await asyncio.sleep(0)


@pytest.fixture
def drain():
    """Let queued callbacks and freshly created tasks run."""
    return _drain


@pytest.fixture
def hub() -> ChannelHub:
    return ChannelHub()


@pytest.fixture
def registry() -> DialogRegistry:
    return DialogRegistry()


@pytest.fixture
def prompter() -> ScriptedPrompter:
    return ScriptedPrompter()


@pytest.fixture
def host(hub: ChannelHub, registry: DialogRegistry, prompter: ScriptedPrompter) -> WindowHost:
    return WindowHost(hub, registry, prompter)


@pytest.fixture
def settings() -> Settings:
    return Settings(dialog_width=400, dialog_height=200, dialog_timeout_seconds=None, max_picture_size=10000)


@pytest.fixture
def manager(host: WindowHost, settings: Settings) -> DialogManager:
    return DialogManager(host, settings)
