"""Host providers."""

from kindle.providers.base import HostProvider
from kindle.providers.system import SystemHostProvider

__all__ = ["HostProvider", "SystemHostProvider"]
