"""Default option values loaded from an INI file.

Example file:

    [parse]
    dedupe = true
    strict = false

    [flat]
    name = eslint-ignores
"""

import configparser
import logging
import os
from pathlib import Path
from typing import Optional, Union

from gitignore_patterns.core.flat_config import DEFAULT_NAME

logger = logging.getLogger(__name__)


class Config:
    """
    Option defaults for parsing and flat config generation.

    Values missing from the file (or a missing file) fall back to the
    library defaults.
    """

    def __init__(self, config_path: Optional[Union[str, os.PathLike]] = None):
        """
        Initialize Config.

        Args:
            config_path: Path to an INI file, or None for pure defaults
        """
        self.config_path = Path(config_path) if config_path else None
        self._parser = configparser.ConfigParser()

        if self.config_path and self.config_path.exists():
            logger.debug("Loading config from %s", self.config_path)
            self._parser.read(self.config_path, encoding='utf-8')

    @property
    def dedupe(self) -> bool:
        return self._parser.getboolean('parse', 'dedupe', fallback=True)

    @property
    def strict(self) -> bool:
        return self._parser.getboolean('parse', 'strict', fallback=True)

    @property
    def name(self) -> str:
        return self._parser.get('flat', 'name', fallback=DEFAULT_NAME)
