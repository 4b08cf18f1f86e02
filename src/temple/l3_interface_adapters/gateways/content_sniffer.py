"""Gateway: content-based binary detection — implements BinaryDetector port."""

from __future__ import annotations

import codecs
from pathlib import Path

_SNIFF_BYTES = 8192


class ContentSniffer:
    """Classifies a file as binary from its leading bytes.

    A NUL byte, or bytes that cannot be the start of a UTF-8 stream, mark the
    file as binary. Files that cannot be opened are reported as text so the
    caller's read surfaces the real error.
    """

    def __init__(self, sniff_bytes: int = _SNIFF_BYTES) -> None:
        self._sniff_bytes = sniff_bytes

    def is_binary(self, path: Path) -> bool:
        try:
            with path.open('rb') as fh:
                chunk = fh.read(self._sniff_bytes)
        except OSError:
            return False
        if b'\x00' in chunk:
            return True
        # final=False: a multi-byte sequence cut at the sniff boundary is not an error
        decoder = codecs.getincrementaldecoder('utf-8')()
        try:
            decoder.decode(chunk, final=False)
        except UnicodeDecodeError:
            return True
        return False
