"""Use case: fetch the default config file into the user's config directory."""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

from temple.l1_entities.errors import DownloadError
from temple.l2_use_cases.ports.downloader import Downloader

log = logging.getLogger('temple.init')

DEFAULT_CONFIG_URL = 'https://raw.githubusercontent.com/skmatz/temple/master/temple.json'


class InitConfigUseCase:
    def __init__(self, downloader: Downloader, confirm: Callable[[str], bool]) -> None:
        self._downloader = downloader
        self._confirm = confirm

    def execute(self, dest: Path, url: str = DEFAULT_CONFIG_URL) -> bool:
        """Download *url* into *dest*. Returns False when the user keeps an existing file."""
        if dest.exists() and not self._confirm(f'Overwrite {dest}?'):
            log.info('Keeping existing config %s', dest)
            return False
        try:
            dest.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise DownloadError(f'Cannot create {dest.parent}: {e}') from e
        log.info('Downloading %s -> %s', url, dest)
        self._downloader.download(url, dest)
        return True
