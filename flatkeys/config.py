"""Settings for flatkeys, read from the environment.

Variables (a ``.env`` file is loaded first; variables already set win):
    FLATKEYS_STYLE: Preset key style - dot, path, rails or underscore
    FLATKEYS_PREFIX: Prefix joined to every top-level key
    FLATKEYS_LOG_LEVEL: Log level for ``setup_logging``
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from dotenv import load_dotenv

from flatkeys.transform.styles import SeparatorStyle, get_style

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class FlattenSettings:
    """Resolved flatkeys settings."""

    style: str = "dot"
    prefix: str = ""
    log_level: str = "INFO"

    def __post_init__(self):
        # Resolves the style so unknown names fail here
        get_style(self.style)
        if self.log_level.upper() not in LOG_LEVELS:
            raise ValueError(
                f"Invalid log level: {self.log_level!r} (expected one of {', '.join(LOG_LEVELS)})"
            )

    @property
    def merger(self) -> SeparatorStyle:
        return get_style(self.style)

    @classmethod
    def from_env(
        cls,
        dotenv_path: Optional[Union[str, Path]] = None,
    ) -> "FlattenSettings":
        """Load settings from the environment.

        Args:
            dotenv_path: Optional ``.env`` file (searched for if not provided)

        Raises:
            ValueError: If FLATKEYS_STYLE or FLATKEYS_LOG_LEVEL is invalid
        """
        load_dotenv(dotenv_path=dotenv_path)

        settings = cls(
            style=os.getenv("FLATKEYS_STYLE", "dot"),
            prefix=os.getenv("FLATKEYS_PREFIX", ""),
            log_level=os.getenv("FLATKEYS_LOG_LEVEL", "INFO"),
        )

        logger.debug(
            "Loaded flatkeys settings",
            extra={"style": settings.style, "prefix": settings.prefix}
        )
        return settings
