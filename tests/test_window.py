import asyncio

import pytest

from easel.dialogs.content import DialogContext
from easel.errors import DialogError, DialogNotFoundError
from easel.windows.window import Window, WindowOptions


@pytest.mark.asyncio
async def test_closed_fires_once_after_a_loop_turn(drain) -> None:
    window = Window(WindowOptions())
    closed: list[Window] = []
    window.on_closed(closed.append)

    assert window.close() is True
    assert window.is_closed is True
    assert closed == []

    assert window.close() is False
    await drain()
    assert closed == [window]


@pytest.mark.asyncio
async def test_on_closed_returns_disconnect(drain) -> None:
    window = Window(WindowOptions())
    closed: list[Window] = []
    disconnect = window.on_closed(closed.append)

    disconnect()
    window.close()
    await drain()

    assert closed == []


def test_close_without_loop_notifies_immediately() -> None:
    window = Window(WindowOptions())
    closed: list[Window] = []
    window.on_closed(closed.append)

    window.close()

    assert closed == [window]


def test_window_geometry_and_chrome() -> None:
    window = Window(WindowOptions(width=320, height=240, show=False, menu=True))
    assert window.size == (320, 240)
    assert window.visible is False
    assert window.menu_enabled is True

    window.remove_menu()
    window.set_content_size(100.4, 50.6)
    window.show()

    assert window.menu_enabled is False
    assert window.size == (100, 51)
    assert window.visible is True
    assert window.contents.window_id == window.id


@pytest.mark.asyncio
async def test_host_runs_content_with_context(host, registry, drain) -> None:
    seen: list[DialogContext] = []

    async def content(ctx: DialogContext) -> None:
        seen.append(ctx)
        ctx.done(None)

    registry.register("inspect", content)
    window = host.create_window()
    host.load(window, "inspect", {"answer": 42})
    await drain()

    assert len(seen) == 1
    assert seen[0].name == "inspect"
    assert seen[0].params == {"answer": 42}
    assert seen[0].window is window
    assert host.windows == [window]


@pytest.mark.asyncio
async def test_host_forgets_closed_windows(host, drain) -> None:
    window = host.create_window()
    window.close()
    await drain()

    assert host.windows == []


@pytest.mark.asyncio
async def test_content_exception_is_reported_as_load_failure(host, registry, drain) -> None:
    async def broken(_ctx: DialogContext) -> None:
        raise RuntimeError("no template")

    registry.register("broken", broken)
    window = host.create_window()
    failures: list[BaseException] = []
    window.on_load_failed(lambda _window, error: failures.append(error))

    host.load(window, "broken")
    await drain()

    assert len(failures) == 1
    assert isinstance(failures[0], RuntimeError)


@pytest.mark.asyncio
async def test_unknown_content_is_reported_as_load_failure(host, drain) -> None:
    window = host.create_window()
    failures: list[BaseException] = []
    window.on_load_failed(lambda _window, error: failures.append(error))

    host.load(window, "missing")
    await drain()

    assert len(failures) == 1
    assert isinstance(failures[0], DialogNotFoundError)


@pytest.mark.asyncio
async def test_close_cancels_running_content(host, registry, drain) -> None:
    started = asyncio.Event()
    cancelled = asyncio.Event()

    async def waits_forever(_ctx: DialogContext) -> None:
        started.set()
        try:
            await asyncio.Event().wait()
        except asyncio.CancelledError:
            cancelled.set()
            raise

    registry.register("forever", waits_forever)
    window = host.create_window()
    failures: list[BaseException] = []
    window.on_load_failed(lambda _window, error: failures.append(error))
    host.load(window, "forever")
    await started.wait()

    window.close()
    await drain()

    assert cancelled.is_set()
    assert failures == []


@pytest.mark.asyncio
async def test_content_ending_without_result_is_reported_as_load_failure(host, registry, drain) -> None:
    async def forgets(_ctx: DialogContext) -> None:
        return None

    registry.register("forgets", forgets)
    window = host.create_window()
    failures: list[BaseException] = []
    window.on_load_failed(lambda _window, error: failures.append(error))

    host.load(window, "forgets")
    await drain()

    assert len(failures) == 1
    assert isinstance(failures[0], DialogError)
