"""Host provider backed by the running system."""

import logging
import os
from pathlib import Path
from typing import Optional

from kindle.errors import TimeZoneResolutionError
from kindle.providers.base import HostProvider


logger = logging.getLogger(__name__)


class SystemHostProvider(HostProvider):
    """Reads the home directory, time zone and environment of this host."""

    def __init__(self, localtime_path: str = "/etc/localtime"):
        self.localtime_path = Path(localtime_path)

    def home_dir(self) -> Path:
        return Path.home()

    def local_timezone(self) -> str:
        """Resolve the zone /etc/localtime points at, falling back to TZ."""
        try:
            resolved = self.localtime_path.resolve(strict=True)
        except OSError as e:
            logger.debug(f"Cannot resolve {self.localtime_path}: {e}")
        else:
            parts = resolved.parts
            if "zoneinfo" in parts:
                index = len(parts) - 1 - parts[::-1].index("zoneinfo")
                zone = "/".join(parts[index + 1:])
                if zone:
                    return zone
            logger.debug(f"{resolved} is not inside a zoneinfo database")

        tz = os.environ.get("TZ", "").lstrip(":")
        if tz:
            return tz
        raise TimeZoneResolutionError(
            f"Unable to determine the host time zone from {self.localtime_path} or TZ"
        )

    def getenv(self, name: str) -> Optional[str]:
        return os.environ.get(name)
