"""Input surfaces used by built-in dialog content."""

from __future__ import annotations

import asyncio
import threading
from collections import deque
from collections.abc import Callable, Iterable, Sequence
from typing import Any, Protocol

from loguru import logger
from rich.console import Console
from rich.prompt import Confirm, FloatPrompt, IntPrompt, Prompt


class DialogPrompter(Protocol):
    """Minimal widget set for dialog content. `None` means the user dismissed."""

    async def choose(self, label: str, choices: Sequence[str], default: str | None = None) -> str | None: ...

    async def ask_number(self, label: str, default: float | None = None, *, integer: bool = False) -> float | None: ...

    async def confirm(self, label: str, default: bool = True) -> bool | None: ...

    async def ask_text(self, label: str, default: str | None = None) -> str | None: ...

    def notify(self, text: str) -> None: ...


class ConsolePrompter:
    """Prompts on a rich console, off the event loop so other windows keep running."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    async def choose(self, label: str, choices: Sequence[str], default: str | None = None) -> str | None:
        kwargs = _with_default({"choices": list(choices), "console": self.console}, default)
        return await self._ask(lambda: Prompt.ask(label, **kwargs))

    async def ask_number(self, label: str, default: float | None = None, *, integer: bool = False) -> float | None:
        if integer:
            kwargs = _with_default({"console": self.console}, None if default is None else int(default))
            return await self._ask(lambda: IntPrompt.ask(label, **kwargs))
        kwargs = _with_default({"console": self.console}, default)
        return await self._ask(lambda: FloatPrompt.ask(label, **kwargs))

    async def confirm(self, label: str, default: bool = True) -> bool | None:
        return await self._ask(lambda: Confirm.ask(label, default=default, console=self.console))

    async def ask_text(self, label: str, default: str | None = None) -> str | None:
        kwargs = _with_default({"console": self.console}, default)
        return await self._ask(lambda: Prompt.ask(label, **kwargs))

    def notify(self, text: str) -> None:
        self.console.print(text)

    @staticmethod
    async def _ask(prompt: Callable[[], Any]) -> Any:
        # One daemon thread per prompt. A prompt left behind by a closed or
        # timed-out dialog stays blocked on stdin and must not hold up loop
        # or interpreter shutdown.
        loop = asyncio.get_running_loop()
        future: asyncio.Future[Any] = loop.create_future()

        def _run() -> None:
            result: Any = None
            error: BaseException | None = None
            try:
                result = prompt()
            except (EOFError, KeyboardInterrupt):
                pass
            except Exception as exc:
                error = exc
            try:
                loop.call_soon_threadsafe(_resolve_prompt, future, result, error)
            except RuntimeError:
                logger.debug("prompt.orphaned loop closed before the answer arrived")

        threading.Thread(target=_run, name="easel-prompt", daemon=True).start()
        return await future


class ScriptedPrompter:
    """Replays canned answers in order; an exhausted script dismisses the dialog."""

    def __init__(self, answers: Iterable[Any] = ()) -> None:
        self._answers: deque[Any] = deque(answers)
        self.asked: list[str] = []
        self.notes: list[str] = []

    async def choose(self, label: str, choices: Sequence[str], default: str | None = None) -> str | None:
        answer = self._next(label)
        if answer == "" and default is not None:
            return default
        if answer is not None and answer not in choices:
            raise ValueError(f"{answer!r} is not one of {list(choices)}")
        return answer

    async def ask_number(self, label: str, default: float | None = None, *, integer: bool = False) -> float | None:
        answer = self._next(label)
        if answer == "" and default is not None:
            answer = default
        if answer is None:
            return None
        return int(answer) if integer else float(answer)

    async def confirm(self, label: str, default: bool = True) -> bool | None:
        answer = self._next(label)
        if answer == "":
            return default
        if answer is None or isinstance(answer, bool):
            return answer
        normalized = str(answer).strip().lower()
        if normalized in ("y", "yes"):
            return True
        if normalized in ("n", "no"):
            return False
        raise ValueError(f"{answer!r} is not a yes/no answer")

    async def ask_text(self, label: str, default: str | None = None) -> str | None:
        answer = self._next(label)
        if answer == "" and default is not None:
            return default
        return None if answer is None else str(answer)

    def notify(self, text: str) -> None:
        self.notes.append(text)

    def _next(self, label: str) -> Any:
        self.asked.append(label)
        if not self._answers:
            return None
        return self._answers.popleft()


def _with_default(kwargs: dict[str, Any], default: Any) -> dict[str, Any]:
    # rich treats any explicit default, None included, as the answer to an empty line.
    if default is not None:
        kwargs["default"] = default
    return kwargs


def _resolve_prompt(future: asyncio.Future[Any], result: Any, error: BaseException | None) -> None:
    # The waiting dialog may have been closed or timed out meanwhile.
    if future.done():
        return
    if error is not None:
        future.set_exception(error)
    else:
        future.set_result(result)
