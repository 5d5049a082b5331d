"""Owned registry of named message channels."""

from __future__ import annotations

from typing import Any

from blinker import Namespace

from easel.ipc.channel import MessageChannel

DIALOG_DONE = "dialogDone"


class ChannelHub:
    """Process-wide set of named channels, owned by whoever builds the app.

    Each hub keeps its own blinker namespace, so two hubs never share
    receivers even when they use the same channel names.
    """

    def __init__(self) -> None:
        self._namespace = Namespace()
        self._channels: dict[str, MessageChannel[Any]] = {}

    def channel(self, name: str) -> MessageChannel[Any]:
        existing = self._channels.get(name)
        if existing is not None:
            return existing
        channel: MessageChannel[Any] = MessageChannel(name, self._namespace.signal(name))
        self._channels[name] = channel
        return channel

    @property
    def dialog_done(self) -> MessageChannel[Any]:
        """Channel on which dialog windows report their single result."""
        return self.channel(DIALOG_DONE)

    def names(self) -> list[str]:
        return sorted(self._channels)
