"""In-process message channels between windows."""

from easel.ipc.channel import Message, MessageChannel, Subscription
from easel.ipc.hub import DIALOG_DONE, ChannelHub

__all__ = [
    "DIALOG_DONE",
    "ChannelHub",
    "Message",
    "MessageChannel",
    "Subscription",
]
