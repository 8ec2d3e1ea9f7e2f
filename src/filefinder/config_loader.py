"""Configuration loading for FileFinder.

The configuration is an optional YAML mapping.  Missing keys fall back to
``DEFAULT_CONFIG``.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

DEFAULT_CONFIG: Dict[str, Any] = {
    'log_level': 'WARNING',
    'results_csv': None,
}

logger = logging.getLogger(__name__)

LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


class ConfigError(Exception):
    """Raised when the configuration file is malformed."""


def load_config(path: Optional[Path] = None) -> Dict[str, Any]:
    """Load the configuration at ``path`` merged over the defaults.

    Args:
        path: YAML file to read, or ``None`` to use the defaults only.

    Raises:
        ConfigError: if the file is not a mapping, holds unknown keys or an
            invalid log level.
    """
    cfg = dict(DEFAULT_CONFIG)
    if path is None:
        return cfg
    with path.open('r', encoding='utf-8') as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as exc:
            raise ConfigError(f'Invalid YAML in {path}: {exc}') from exc
    if data is None:
        return cfg
    if not isinstance(data, dict):
        raise ConfigError(f'{path} must contain a mapping')
    unknown = set(data) - set(DEFAULT_CONFIG)
    if unknown:
        raise ConfigError(f'Unknown configuration keys: {", ".join(sorted(unknown))}')
    cfg.update(data)

    level = str(cfg['log_level']).upper()
    if level not in LOG_LEVELS:
        raise ConfigError(f'Unsupported log level: {cfg["log_level"]}')
    cfg['log_level'] = level
    if cfg['results_csv'] is not None:
        cfg['results_csv'] = str(cfg['results_csv'])
    logger.debug('Loaded configuration from %s', path)
    return cfg
