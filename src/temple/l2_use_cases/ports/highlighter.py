"""Port: syntax highlighter for preview lines."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol


class Highlighter(Protocol):
    """Colours source lines for terminal display."""

    def highlight(self, path: Path, lines: list[str]) -> list[str]:
        """Return exactly one rendered line per input line."""
        ...
