"""Dataclass-based settings for binit's own diagnostics.

Design principles:
- Environment variable overrides with sensible defaults
- Optional dotenv file layered underneath the OS environment
- Settings never leak into the environment handed to the target program
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional, Union

from binit.config.env_loader import EnvLoader

DEFAULT_PREFIX = "BINIT"

_ALLOWED_LOG_FORMATS = {"console", "json"}


@dataclass
class LogSettings:
    """Logging configuration

    Attributes:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format: Log format (console or json)
        log_file: Optional file mirroring the stderr output
    """

    level: str = "WARNING"
    format: str = "console"
    log_file: Optional[str] = None

    def __post_init__(self) -> None:
        self.level = self.level.upper()
        self.format = self.format.lower()
        self.validate()

    def validate(self) -> None:
        if self.format not in _ALLOWED_LOG_FORMATS:
            raise ValueError(
                f"Invalid log format '{self.format}'. Expected one of {sorted(_ALLOWED_LOG_FORMATS)}."
            )
        if not isinstance(logging.getLevelName(self.level), int):
            raise ValueError(f"Invalid log level '{self.level}'.")

    @property
    def level_number(self) -> int:
        return logging.getLevelName(self.level)

    @property
    def json_format(self) -> bool:
        return self.format == "json"

    @classmethod
    def from_env(
        cls,
        prefix: str = DEFAULT_PREFIX,
        env_file: Optional[Union[Path, str]] = None,
        environ: Optional[Mapping[str, str]] = None,
    ) -> "LogSettings":
        """Load logging settings from environment variables

        Environment variables:
            {prefix}_LOG_LEVEL: Logging level (default: WARNING)
            {prefix}_LOG_FORMAT: console or json (default: console)
            {prefix}_LOG_FILE: Optional log file path
        """
        env_data = EnvLoader(env_file).load(environ=environ)
        return cls(
            level=env_data.get(f"{prefix}_LOG_LEVEL", "WARNING"),
            format=env_data.get(f"{prefix}_LOG_FORMAT", "console"),
            log_file=env_data.get(f"{prefix}_LOG_FILE") or None,
        )
