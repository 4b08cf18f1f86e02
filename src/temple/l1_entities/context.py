"""L1 entity: per-run process state passed explicitly to use cases."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class RunContext:
    """Home and working directory for a single run.

    Use cases receive this instead of reading ``Path.home()`` / ``Path.cwd()``
    themselves, so tests can point both at a temp directory.
    """

    home_dir: Path
    work_dir: Path

    @classmethod
    def current(cls) -> RunContext:
        return cls(home_dir=Path.home(), work_dir=Path.cwd())

    def expand(self, path: str) -> Path:
        """Expand a leading ``~`` to :attr:`home_dir` and anchor relative paths at :attr:`work_dir`."""
        if path == '~':
            expanded = self.home_dir
        elif path.startswith(('~/', '~\\')):
            expanded = self.home_dir / path[2:]
        else:
            expanded = Path(path)
        if not expanded.is_absolute():
            expanded = self.work_dir / expanded
        return Path(os.path.abspath(expanded))
