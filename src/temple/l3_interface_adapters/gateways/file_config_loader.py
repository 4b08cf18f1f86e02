"""Gateway: JSON/YAML configuration loader."""

from __future__ import annotations

import copy
import json
import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from temple.l1_entities.config import TempleConfig
from temple.l1_entities.errors import ConfigNotFoundError, ConfigParseError
from temple.l3_interface_adapters.gateways.paths import DEFAULT_CONFIG_PATHS

log = logging.getLogger('temple.config')

CONFIG_DEFAULTS: dict = {
    'config': {
        'headSize': 10,
        'itemSize': 10,
        'matchPolicy': 'fuzzy',
    },
    'templates': [],
}

# Display keys may sit at the top level instead of under "config".
_DISPLAY_KEYS = ('headSize', 'itemSize', 'syntaxHighlight', 'matchPolicy')

_YAML_SUFFIXES = ('.yaml', '.yml')


class FileConfigLoader:
    """Loads TempleConfig from a JSON or YAML file, filling display defaults."""

    def load(self, config_path: str | None = None) -> TempleConfig:
        path = resolve_config_path(config_path)
        raw = _read_document(path)
        try:
            return build_temple_config(raw)
        except ValidationError as e:
            raise ConfigParseError(f'Invalid config {path}:\n{e}') from e


def resolve_config_path(config_path: str | None = None) -> Path:
    """Return the explicit *config_path* or the first existing default location."""
    if config_path is not None:
        path = Path(config_path).expanduser()
        if not path.is_file():
            raise ConfigNotFoundError(f'Config file not found: {path}')
        return path
    for default_path in DEFAULT_CONFIG_PATHS:
        if default_path.is_file():
            return default_path
    searched = ', '.join(str(p) for p in DEFAULT_CONFIG_PATHS)
    raise ConfigNotFoundError(f'Config file not found (searched: {searched}). Run `temple --init` to create one.')


def _read_document(path: Path) -> dict:
    log.debug('Reading config %s', path)
    try:
        text = path.read_text(encoding='utf-8')
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigParseError(f'Cannot read config {path}: {e}') from e
    try:
        if path.suffix.lower() in _YAML_SUFFIXES:
            data = yaml.safe_load(text)
        else:
            data = json.loads(text)
    except (ValueError, yaml.YAMLError) as e:
        raise ConfigParseError(f'Malformed config {path}: {e}') from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigParseError(f'Malformed config {path}: top level must be an object')
    return data


def deep_merge(base: dict, override: dict) -> dict:
    """Recursively merge *override* into *base* (mutates base)."""
    for key, value in override.items():
        if key in base and isinstance(base[key], dict) and isinstance(value, dict):
            deep_merge(base[key], value)
        else:
            base[key] = value
    return base


def build_temple_config(raw: dict) -> TempleConfig:
    """Merge *raw* on top of defaults, then validate."""
    document = dict(raw)
    flat = {key: document.pop(key) for key in _DISPLAY_KEYS if key in document}
    merged = copy.deepcopy(CONFIG_DEFAULTS)
    deep_merge(merged, document)
    if flat:
        if not isinstance(merged['config'], dict):
            merged['config'] = {}
        merged['config'].update(flat)
    return TempleConfig.model_validate(merged)
