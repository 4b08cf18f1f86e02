"""Port: HTTP file downloader."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol


class Downloader(Protocol):
    def download(self, url: str, dest: Path) -> None:
        """Stream *url* into *dest*. Raises DownloadError on failure."""
        ...
