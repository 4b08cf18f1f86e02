"""Port: system clipboard."""

from __future__ import annotations

from typing import Protocol


class Clipboard(Protocol):
    def copy(self, text: str) -> None:
        """Replace the clipboard contents with *text*. Raises ClipboardError on failure."""
        ...
