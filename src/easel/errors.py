"""Application-level exception types for easel."""

from __future__ import annotations


class EaselError(Exception):
    """Base exception for easel."""


class ConfigurationError(EaselError):
    """Raised when settings cannot be loaded or are inconsistent."""


class DialogError(EaselError):
    """Base exception for dialog sessions and dialog content."""


class DialogNotFoundError(DialogError):
    """Raised when no dialog content is registered under the requested name."""

    def __init__(self, name: str) -> None:
        super().__init__(f"unknown dialog: {name}")
        self.name = name


class DialogLoadError(DialogError):
    """Raised when dialog content fails to load into its window."""

    def __init__(self, name: str, cause: BaseException | None = None) -> None:
        detail = f": {cause!s}" if cause is not None else ""
        super().__init__(f"dialog {name} failed to load{detail}")
        self.name = name
        self.cause = cause


class DialogTimeoutError(DialogError):
    """Raised when a dialog produced neither a result nor a close before the deadline."""

    def __init__(self, name: str, timeout: float) -> None:
        super().__init__(f"dialog {name} timed out after {timeout:g}s")
        self.name = name
        self.timeout = timeout


class ActionError(EaselError):
    """Base exception for action lookup and invocation."""


class ActionNotFoundError(ActionError):
    """Raised when an action id is not registered."""


class ActionDisabledError(ActionError):
    """Raised when a disabled action is invoked."""
