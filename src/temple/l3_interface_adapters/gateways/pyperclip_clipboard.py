"""Gateway: system clipboard via pyperclip — implements Clipboard port."""

from __future__ import annotations

import pyperclip

from temple.l1_entities.errors import ClipboardError


class PyperclipClipboard:
    def copy(self, text: str) -> None:
        try:
            pyperclip.copy(text)
        except pyperclip.PyperclipException as e:
            raise ClipboardError(f'Clipboard unavailable: {e}') from e
