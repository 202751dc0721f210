"""Collector for non-fatal problems met while planning."""

import logging
from typing import List, Optional


logger = logging.getLogger(__name__)


class Diagnostics:
    """Records warnings so callers can tell a partial descriptor from a full one.

    Every warning is also logged, so the log stays the place operators look.
    """

    def __init__(self, log: Optional[logging.Logger] = None):
        self.warnings: List[str] = []
        self.degraded = False
        self._log = log or logger

    def warn(self, message: str, log: Optional[logging.Logger] = None) -> None:
        """Record a skipped entry; planning continues."""
        (log or self._log).warning(message)
        self.warnings.append(message)

    def degrade(self, message: str, log: Optional[logging.Logger] = None) -> None:
        """Record that the remaining entries of a planner were dropped."""
        self.warn(message, log)
        self.degraded = True
