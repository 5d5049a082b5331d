from __future__ import annotations

import pytest

from easel.models.shortcut import KeyInput, ToolShortcuts


def test_parse_accelerator() -> None:
    assert KeyInput.parse("Control+Shift+B") == KeyInput(("Control", "Shift"), "b")
    assert KeyInput.parse("alt + x") == KeyInput(("Alt",), "x")
    assert KeyInput.parse("F5") == KeyInput((), "F5")
    assert KeyInput.parse("CommandOrControl+Plus") == KeyInput(("CommandOrControl",), "+")
    assert KeyInput.parse("Control++") == KeyInput(("Control",), "+")


@pytest.mark.parametrize("text", ["", "Control+", "Hyper+K"])
def test_parse_rejects_malformed(text: str) -> None:
    with pytest.raises(ValueError):
        KeyInput.parse(text)


def test_accelerator_text() -> None:
    assert KeyInput(("Control", "Shift"), "b").to_accelerator() == "Control+Shift+B"
    assert str(KeyInput(("Alt",), "+")) == "Alt+Plus"
    assert str(KeyInput((), "Escape")) == "Escape"


def test_tool_shortcuts_payload() -> None:
    shortcuts = ToolShortcuts.from_payload(
        {"shortcut": {"modifiers": ["Control"], "key": "b"}, "tempShortcut": "Alt+X"},
    )

    assert shortcuts == ToolShortcuts(KeyInput(("Control",), "b"), KeyInput(("Alt",), "x"))
    assert shortcuts.to_payload() == {
        "shortcut": {"modifiers": ["Control"], "key": "b"},
        "tempShortcut": {"modifiers": ["Alt"], "key": "x"},
    }
    assert ToolShortcuts.from_payload({}) == ToolShortcuts()
    assert ToolShortcuts().to_payload() == {"shortcut": None, "tempShortcut": None}
