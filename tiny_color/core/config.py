"""CLI defaults from the environment.

Command-line flags always win. When a flag is absent, the matching
variable is read from os.environ:

  TINY_COLOR_FORMAT     text | json  (default output format)
  TINY_COLOR_LOG_LEVEL  DEBUG | INFO | WARNING | ERROR  (default WARNING)

Unknown values fall back to the defaults.
"""

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass

FORMATS = ('text', 'json')


@dataclass
class Settings:
    output_format: str = 'text'
    log_level: int = logging.WARNING


def _level_from_name(name: str | None) -> int | None:
    if not name:
        return None
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else None


def load_settings(json_flag: bool = False, verbose: int = 0, environ: Mapping[str, str] | None = None) -> Settings:
    """Resolve settings from flags, then environment, then defaults."""
    env = os.environ if environ is None else environ
    settings = Settings()

    if json_flag:
        settings.output_format = 'json'
    else:
        fmt = env.get('TINY_COLOR_FORMAT', '').strip().lower()
        if fmt in FORMATS:
            settings.output_format = fmt

    if verbose:
        # -v -> INFO, -vv -> DEBUG
        settings.log_level = max(logging.WARNING - verbose * 10, logging.DEBUG)
    else:
        level = _level_from_name(env.get('TINY_COLOR_LOG_LEVEL'))
        if level is not None:
            settings.log_level = level

    return settings
