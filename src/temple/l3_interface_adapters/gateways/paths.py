"""Shared path constants for configuration and logs."""

from __future__ import annotations

from pathlib import Path

from platformdirs import user_config_path, user_log_path

CONFIG_DIR = user_config_path('temple')
LOG_DIR = user_log_path('temple')

# Location used by earlier releases; still read, never written.
LEGACY_CONFIG_PATH = Path.home() / '.config' / 'temple.json'

DEFAULT_CONFIG_PATHS = [
    CONFIG_DIR / 'temple.json',
    CONFIG_DIR / 'temple.yaml',
    CONFIG_DIR / 'temple.yml',
    LEGACY_CONFIG_PATH,
]
