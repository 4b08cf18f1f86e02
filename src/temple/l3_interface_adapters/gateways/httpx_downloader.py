"""Gateway: HTTP downloads via httpx — implements Downloader port."""

from __future__ import annotations

import logging
from pathlib import Path

import httpx

from temple.l1_entities.errors import DownloadError

log = logging.getLogger('temple.init')

_TIMEOUT = 30.0


class HttpxDownloader:
    """Streams a URL to disk. *client* is injectable for tests; otherwise one is opened per call."""

    def __init__(self, client: httpx.Client | None = None, timeout: float = _TIMEOUT) -> None:
        self._client = client
        self._timeout = timeout

    def download(self, url: str, dest: Path) -> None:
        if self._client is not None:
            self._fetch(self._client, url, dest)
            return
        with httpx.Client(timeout=self._timeout, follow_redirects=True) as client:
            self._fetch(client, url, dest)

    def _fetch(self, client: httpx.Client, url: str, dest: Path) -> None:
        try:
            with client.stream('GET', url, follow_redirects=True, timeout=self._timeout) as response:
                response.raise_for_status()
                # dest is only opened once the status is good, so a failed fetch keeps the old file
                with dest.open('wb') as out:
                    for chunk in response.iter_bytes():
                        out.write(chunk)
        except httpx.HTTPStatusError as e:
            raise DownloadError(f'{url} returned HTTP {e.response.status_code}') from e
        except httpx.HTTPError as e:
            raise DownloadError(f'Failed to download {url}: {e}') from e
        except OSError as e:
            raise DownloadError(f'Cannot write {dest}: {e}') from e
        log.info('Downloaded %s -> %s', url, dest)
