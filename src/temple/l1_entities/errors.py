"""Domain error types."""

from __future__ import annotations


class TempleError(Exception):
    """Base class for every error the CLI reports to the user."""


class ConfigNotFoundError(TempleError):
    """Raised when no config file exists at the requested or default locations."""


class ConfigParseError(TempleError):
    """Raised when a config file is malformed or fails schema validation."""


class SelectionAbortedError(TempleError):
    """Raised when the user cancels the picker without choosing a template."""


class SourceOpenError(TempleError):
    """Raised when the selected template file cannot be opened for reading."""


class DestinationWriteError(TempleError):
    """Raised when the destination file cannot be created or written."""


class ClipboardError(TempleError):
    """Raised when the system clipboard rejects the copy."""


class DownloadError(TempleError):
    """Raised when fetching the default config over HTTP fails."""
