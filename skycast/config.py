# skycast: current weather in your terminal
# Copyright (C) 2026 skycast Project Contributors
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as published
# by the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
# GNU Affero General Public License for more details.
#
# You should have received a copy of the GNU Affero General Public License
# along with this program. If not, see <https://www.gnu.org/licenses/>.

"""Resolve the run configuration.

Two sources are supported, tried in this order:

1. Environment: ``API_KEY``, ``CITY`` and ``UNITS``, optionally seeded
   from a ``.env`` file one directory above the executable. Variables
   already set in the process win over the file.
2. ``config.json`` in the working directory, a JSON object with the
   keys ``apiKey``, ``city`` and ``units``. Only consulted when none of
   the three variables is set.
"""

from __future__ import annotations

import json
import logging
import os
import sys
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import ValidationError

from skycast.errors import ConfigError
from skycast.models.config import Configuration

logger = logging.getLogger(__name__)

ENV_FILE_NAME = ".env"
CONFIG_FILE_NAME = "config.json"
ENV_VARS = ("API_KEY", "CITY", "UNITS")

MISSING_CONFIG_MESSAGE = (
    "Please set the API_KEY, CITY, and UNITS environment variables "
    f"(or provide apiKey, city and units in {CONFIG_FILE_NAME})."
)


def default_env_file() -> Path:
    """``<executable-dir>/../.env``."""
    executable_dir = Path(sys.argv[0]).resolve().parent
    return executable_dir.parent / ENV_FILE_NAME


def default_config_file() -> Path:
    return Path.cwd() / CONFIG_FILE_NAME


def load_env_file(path: Path) -> bool:
    """Load KEY=VALUE pairs from *path* into ``os.environ``.

    Returns False when the file does not exist.
    """
    if not path.is_file():
        logger.debug("No dotenv file at %s", path)
        return False
    load_dotenv(path, override=False)
    logger.debug("Loaded environment from %s", path)
    return True


def load_config_file(path: Path) -> Configuration:
    """Read ``config.json``. Any I/O, JSON or schema problem is a ConfigError."""
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        raise ConfigError(f"Could not read {path}: {e}") from e

    try:
        config = Configuration.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration in {path}: {e}") from e

    logger.debug("Loaded configuration from %s", path)
    return config


def _config_from_environment() -> Optional[Configuration]:
    values = {name: os.environ.get(name, "") for name in ENV_VARS}
    if not any(values.values()):
        return None
    if not all(values.values()):
        missing = ", ".join(name for name, value in values.items() if not value)
        logger.debug("Environment is missing: %s", missing)
        raise ConfigError(MISSING_CONFIG_MESSAGE)
    return Configuration(
        api_key=values["API_KEY"],
        city=values["CITY"],
        units=values["UNITS"],
    )


def load_config(
    env_file: Optional[Path] = None,
    config_file: Optional[Path] = None,
) -> Configuration:
    """Return the configuration for this run or raise ConfigError.

    Args:
        env_file: dotenv file to load. Defaults to ``default_env_file()``.
        config_file: JSON file to fall back to. Defaults to
            ``config.json`` in the working directory.
    """
    load_env_file(env_file or default_env_file())

    config = _config_from_environment()
    if config is not None:
        logger.info("Using configuration from the environment")
        return config

    path = config_file or default_config_file()
    if path.is_file():
        logger.info("Using configuration from %s", path)
        return load_config_file(path)

    raise ConfigError(MISSING_CONFIG_MESSAGE)
