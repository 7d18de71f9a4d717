from __future__ import annotations

"""
Logging Configuration Model.

deeptree logs to stderr for the person running the generator and, with
--log-file, to a rotating file kept for later comparison of runs.
"""

import logging
from dataclasses import dataclass
from typing import Optional

CONSOLE_FORMAT = "%(levelname)s | %(message)s"
FILE_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


@dataclass(frozen=True)
class LoggingConfig:
    """
    Settings derived from the CLI flags.

    Attributes:
        level: Level name ('DEBUG' with --debug, otherwise 'INFO').
        console: Emit records on stderr.
        log_file: Path given with --log-file, if any.
        max_bytes: Size threshold for file rotation.
        backup_count: Rotated files to keep.
    """
    level: str = "INFO"
    console: bool = True
    log_file: Optional[str] = None
    max_bytes: int = 1024 * 1024
    backup_count: int = 2

    @property
    def level_int(self) -> int:
        """Numeric level; unknown names fall back to INFO."""
        value = logging.getLevelName(str(self.level or "").strip().upper())
        return value if isinstance(value, int) else logging.INFO
