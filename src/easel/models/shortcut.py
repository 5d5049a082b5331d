"""Keyboard shortcuts assigned to tools."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Literal

type KeyModifier = Literal["Command", "Control", "CommandOrControl", "Alt", "Shift"]

KEY_MODIFIERS: tuple[KeyModifier, ...] = ("Command", "Control", "CommandOrControl", "Alt", "Shift")
_MODIFIERS_BY_NAME: dict[str, KeyModifier] = {modifier.lower(): modifier for modifier in KEY_MODIFIERS}


@dataclass(frozen=True)
class KeyInput:
    """A key plus modifiers, written as an accelerator such as `Control+Shift+B`."""

    modifiers: tuple[KeyModifier, ...]
    key: str

    @classmethod
    def parse(cls, text: str) -> KeyInput:
        parts = [part.strip() for part in text.split("+")]
        # "Control++" names the plus key.
        if text.endswith("++"):
            parts = [*parts[:-2], "+"]
        if not parts or not parts[-1]:
            raise ValueError(f"no key in shortcut {text!r}")
        *names, key = parts
        modifiers: list[KeyModifier] = []
        for name in names:
            modifier = _MODIFIERS_BY_NAME.get(name.lower())
            if modifier is None:
                raise ValueError(f"unknown modifier {name!r} in shortcut {text!r}")
            modifiers.append(modifier)
        if key == "Plus":
            key = "+"
        elif len(key) == 1:
            key = key.lower()
        return cls(tuple(modifiers), key)

    @classmethod
    def from_data(cls, data: Mapping[str, Any]) -> KeyInput:
        return cls(tuple(data.get("modifiers", ())), str(data["key"]))

    def to_data(self) -> dict[str, Any]:
        return {"modifiers": list(self.modifiers), "key": self.key}

    def to_accelerator(self) -> str:
        key = self.key
        if len(key) == 1:
            key = key.upper()
        if key == "+":
            key = "Plus"
        return "+".join([*self.modifiers, key])

    def __str__(self) -> str:
        return self.to_accelerator()


@dataclass(frozen=True)
class ToolShortcuts:
    """A tool's permanent shortcut and its hold-to-use temporary shortcut."""

    shortcut: KeyInput | None = None
    temp_shortcut: KeyInput | None = None

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> ToolShortcuts:
        return cls(_key_input(payload.get("shortcut")), _key_input(payload.get("tempShortcut")))

    def to_payload(self) -> dict[str, Any]:
        return {
            "shortcut": self.shortcut.to_data() if self.shortcut else None,
            "tempShortcut": self.temp_shortcut.to_data() if self.temp_shortcut else None,
        }


def _key_input(value: Any) -> KeyInput | None:
    if value is None or value == "":
        return None
    if isinstance(value, KeyInput):
        return value
    if isinstance(value, str):
        return KeyInput.parse(value)
    return KeyInput.from_data(value)
