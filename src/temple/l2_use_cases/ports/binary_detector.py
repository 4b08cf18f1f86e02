"""Port: binary content detection."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol


class BinaryDetector(Protocol):
    def is_binary(self, path: Path) -> bool:
        """True when *path* holds binary content. Unreadable paths are not binary."""
        ...
