"""Named, queued message channels backed by blinker signals."""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from blinker import Signal
from loguru import logger


@dataclass(frozen=True)
class Message[T]:
    """One message on a channel: the emitting window's identity plus an opaque payload."""

    channel: str
    sender: Any
    payload: T


type MessagePredicate[T] = Callable[[Message[T]], bool]
type MessageHandler[T] = Callable[[Message[T]], None]


class Subscription:
    """Single-use handle returned by `MessageChannel.subscribe`."""

    def __init__(self, signal: Signal, receiver: Callable[..., None]) -> None:
        self._signal = signal
        self._receiver = receiver
        self._active = True

    @property
    def active(self) -> bool:
        return self._active

    def unsubscribe(self) -> bool:
        """Disconnect the receiver. Returns False if it was already disconnected."""
        if not self._active:
            return False
        self._active = False
        self._signal.disconnect(self._receiver)
        return True


class MessageChannel[T]:
    """Many-writer channel read through per-subscriber filters.

    `send` hands the message to the running event loop instead of calling
    receivers directly, so delivery only reaches subscriptions that are
    still connected when the loop gets to it. Subscribing and unsubscribing
    must happen on the loop's thread.
    """

    def __init__(self, name: str, signal: Signal | None = None) -> None:
        self.name = name
        self._signal = signal if signal is not None else Signal(name)

    @property
    def receiver_count(self) -> int:
        return len(self._signal.receivers)

    def subscribe(self, predicate: MessagePredicate[T], handler: MessageHandler[T]) -> Subscription:
        subscription: Subscription | None = None

        def _receiver(sender: Any, *, message: Message[T]) -> None:
            if subscription is None or not subscription.active:
                return
            if predicate(message):
                handler(message)

        self._signal.connect(_receiver, weak=False)
        subscription = Subscription(self._signal, _receiver)
        return subscription

    def listen(self, handler: MessageHandler[T], *, sender: Any = None) -> Subscription:
        """Subscribe to every message, or only to those emitted by `sender`."""
        if sender is None:
            return self.subscribe(lambda _message: True, handler)
        return self.subscribe(lambda message: message.sender == sender, handler)

    def unsubscribe(self, subscription: Subscription) -> bool:
        return subscription.unsubscribe()

    def send(self, sender: Any, payload: T) -> None:
        """Queue `payload` for delivery on the running event loop."""
        loop = asyncio.get_running_loop()
        message = Message(channel=self.name, sender=sender, payload=payload)
        loop.call_soon(self._deliver, message)

    def _deliver(self, message: Message[T]) -> None:
        if not self._signal.receivers:
            logger.debug("ipc.undelivered channel={} sender={}", self.name, message.sender)
            return
        # One failing subscriber must not starve the ones connected after it.
        for receiver in list(self._signal.receivers_for(message.sender)):
            try:
                receiver(message.sender, message=message)
            except Exception:
                logger.opt(exception=True).warning(
                    "ipc.receiver_failed channel={} sender={}", self.name, message.sender
                )
