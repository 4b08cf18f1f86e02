"""Use case: render the head of a template file for the picker detail pane."""

from __future__ import annotations

import logging

from temple.l1_entities.context import RunContext
from temple.l2_use_cases.ports.binary_detector import BinaryDetector
from temple.l2_use_cases.ports.highlighter import Highlighter

log = logging.getLogger('temple.preview')

BINARY_MARKER = 'binary'


def split_lines(content: str) -> list[str]:
    """Split on line feeds only; a trailing newline does not start an extra line."""
    if not content:
        return []
    lines = content.split('\n')
    if content.endswith('\n'):
        lines.pop()
    return [line.removesuffix('\r') for line in lines]


def format_head(lines: list[str]) -> str:
    """Prefix each line with a right-aligned 1-based line number."""
    return '\n'.join(f'{i:4d} {line}' for i, line in enumerate(lines, start=1))


class PreviewUseCase:
    """Loads a template, truncates it to *head_size* lines and highlights it.

    Read failures are returned as text so the picker can show them in place
    of the content; they never abort the run.
    """

    def __init__(self, context: RunContext, detector: BinaryDetector, highlighter: Highlighter) -> None:
        self._context = context
        self._detector = detector
        self._highlighter = highlighter

    def preview(self, path: str, head_size: int) -> str:
        target = self._context.expand(path)
        if self._detector.is_binary(target):
            return BINARY_MARKER
        try:
            content = target.read_bytes().decode('utf-8')
        except (OSError, UnicodeDecodeError) as e:
            log.debug('Preview of %s failed: %s', target, e)
            return str(e)
        head = split_lines(content)[: max(head_size, 0)]
        if not head:
            return ''
        return format_head(self._highlighter.highlight(target, head))
