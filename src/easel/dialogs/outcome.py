"""Dialog outcomes and the write-once cell that holds them."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import Literal

type EmptyReason = Literal["closed", "aborted"]


@dataclass(frozen=True)
class Resolved[T]:
    """The dialog reported a result."""

    value: T


@dataclass(frozen=True)
class ResolvedEmpty:
    """The dialog ended without a result."""

    reason: EmptyReason = "closed"


type Outcome[T] = Resolved[T] | ResolvedEmpty


class SettlementCell[T]:
    """Write-once slot. Only the first write has any effect."""

    def __init__(self) -> None:
        self._future: asyncio.Future[Outcome[T]] = asyncio.get_running_loop().create_future()

    @property
    def settled(self) -> bool:
        return self._future.done()

    def try_settle(self, outcome: Outcome[T]) -> bool:
        if self._future.done():
            return False
        self._future.set_result(outcome)
        return True

    def try_fail(self, error: BaseException) -> bool:
        if self._future.done():
            return False
        self._future.set_exception(error)
        return True

    async def wait(self) -> Outcome[T]:
        # Shielded so a timeout or cancellation of the waiter leaves the cell writable.
        return await asyncio.shield(self._future)
