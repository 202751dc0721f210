"""Host capability interface used during assembly."""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional


class HostProvider(ABC):
    """Everything the assembler needs to know about the host machine."""

    @abstractmethod
    def home_dir(self) -> Path:
        """Home directory of the invoking user.

        Raises OSError or RuntimeError when it cannot be determined.
        """
        pass

    @abstractmethod
    def local_timezone(self) -> str:
        """IANA name of the host's configured time zone.

        Raises TimeZoneResolutionError when it cannot be determined.
        """
        pass

    @abstractmethod
    def getenv(self, name: str) -> Optional[str]:
        """Value of an environment variable, None if unset."""
        pass
