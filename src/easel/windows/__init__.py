"""Windows hosting dialog content."""

from easel.windows.window import ContentHandle, Window, WindowOptions

__all__ = ["ContentHandle", "Window", "WindowOptions"]
