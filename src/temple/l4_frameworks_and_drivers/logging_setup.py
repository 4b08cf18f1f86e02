"""File-based debug logging setup."""

from __future__ import annotations

import logging
from pathlib import Path


def setup_file_logging(log_dir: Path) -> Path:
    """Send everything under the ``temple`` logger to a debug file in *log_dir*."""
    log_dir.mkdir(parents=True, exist_ok=True)
    log_path = log_dir / 'temple_debug.log'
    handler = logging.FileHandler(log_path, encoding='utf-8')
    handler.setFormatter(logging.Formatter('%(asctime)s %(levelname)s %(name)s %(message)s'))
    root = logging.getLogger('temple')
    root.setLevel(logging.DEBUG)
    root.addHandler(handler)
    root.info('Debug logging started → %s', log_path)
    return log_path
