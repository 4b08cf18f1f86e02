"""Use case: copy the selected template into the working directory or onto the clipboard."""

from __future__ import annotations

import enum
import logging
import shutil
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from temple.l1_entities.context import RunContext
from temple.l1_entities.errors import DestinationWriteError, SourceOpenError
from temple.l1_entities.template import Template
from temple.l2_use_cases.ports.clipboard import Clipboard

log = logging.getLogger('temple.install')


class InstallStatus(enum.Enum):
    COPIED = 'copied'
    UNCHANGED = 'unchanged'  # source and destination are the same file
    DECLINED = 'declined'  # user refused to overwrite
    CLIPBOARD = 'clipboard'


@dataclass(frozen=True)
class InstallResult:
    status: InstallStatus
    source: Path
    destination: Path | None = None

    def describe(self) -> str:
        """Human-readable ``src -> dst`` line, or empty when nothing was written."""
        if self.status is InstallStatus.COPIED:
            return f'{self.source} -> {self.destination}'
        if self.status is InstallStatus.CLIPBOARD:
            return f'{self.source} -> clipboard'
        return ''


class InstallTemplateUseCase:
    """Writes a template's bytes to a destination file or to the clipboard.

    *confirm* is asked before an existing destination is overwritten; it
    receives the prompt text and returns True to proceed.
    """

    def __init__(
        self,
        context: RunContext,
        confirm: Callable[[str], bool],
        clipboard: Clipboard | None = None,
    ) -> None:
        self._context = context
        self._confirm = confirm
        self._clipboard = clipboard

    def resolve(self, template: Template, destination_name: str | None = None) -> tuple[Path, Path]:
        """Absolute (source, destination) paths for *template*."""
        source = self._context.expand(template.path)
        destination = self._context.expand(destination_name or template.destination_name)
        return source, destination

    def confirm_overwrite(self, destination: Path) -> bool:
        """True when *destination* is free or the user agreed to replace it."""
        if not destination.exists():
            return True
        return self._confirm(f'Overwrite {destination}?')

    def install(self, template: Template, destination_name: str | None = None) -> InstallResult:
        source, destination = self.resolve(template, destination_name)
        if source == destination:
            log.info('Source and destination are the same file: %s', source)
            return InstallResult(InstallStatus.UNCHANGED, source, destination)

        if not self.confirm_overwrite(destination):
            log.info('Overwrite of %s declined', destination)
            return InstallResult(InstallStatus.DECLINED, source, destination)

        try:
            src = source.open('rb')
        except OSError as e:
            raise SourceOpenError(f'Cannot open template {source}: {e}') from e
        with src:
            try:
                with destination.open('wb') as dst:
                    shutil.copyfileobj(src, dst)
            except OSError as e:
                raise DestinationWriteError(f'Cannot write {destination}: {e}') from e

        log.info('Copied %s -> %s', source, destination)
        return InstallResult(InstallStatus.COPIED, source, destination)

    def copy_to_clipboard(self, template: Template) -> InstallResult:
        if self._clipboard is None:
            raise ValueError('No clipboard configured')
        source = self._context.expand(template.path)
        try:
            text = source.read_bytes().decode('utf-8', errors='replace')
        except OSError as e:
            raise SourceOpenError(f'Cannot read template {source}: {e}') from e
        self._clipboard.copy(text)
        log.info('Copied %s -> clipboard', source)
        return InstallResult(InstallStatus.CLIPBOARD, source)
