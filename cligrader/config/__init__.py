# SPDX-License-Identifier: AGPL-3.0-or-later
# Copyright (C) 2026 João Tonini
"""cligrader configuration handling."""

import logging
import tomllib
from pathlib import Path
from typing import Any, Optional

from cligrader.errors import InvalidInputError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATHS = [
    Path.home() / '.config' / 'cligrader' / 'cligrader.toml',
    Path('/etc/cligrader/cligrader.toml'),
]


def find_config() -> Path | None:
    """Find the first existing config file."""
    for path in DEFAULT_CONFIG_PATHS:
        if path.exists():
            return path
    return None


def get_default_config_path() -> Path:
    """Get path to packaged default config."""
    return Path(__file__).parent / 'default.toml'


def _read_toml(path: Path) -> dict[str, Any]:
    try:
        with open(path, 'rb') as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise InvalidInputError(f"Cannot read config {path}: {e}") from e


def load_config(path: Optional[Path | str] = None) -> dict[str, Any]:
    """
    Load configuration, merging user values over the packaged defaults.

    Args:
        path: Explicit config file. When omitted the default search
            locations are tried in order.

    Returns:
        Config dict with every section of default.toml present.
    """
    config = _read_toml(get_default_config_path())

    user_path = Path(path) if path else find_config()
    if user_path is None:
        logger.debug("No user config found, using packaged defaults")
        return config

    logger.debug(f"Loading config from {user_path}")
    user_config = _read_toml(user_path)
    for section, values in user_config.items():
        if isinstance(values, dict) and isinstance(config.get(section), dict):
            config[section].update(values)
        else:
            config[section] = values
    return config
