"""
Kindle - first-boot provisioning for container machines.

Assembles the Ignition config a freshly created VM reads on first boot:
accounts, directories, files, links and systemd units, all inline.
"""

__version__ = "1.0.0"

from kindle.ignition import AssemblyResult, ConfigAssembler, IgnitionBuilder
from kindle.models.ignition import IgnitionConfig
from kindle.models.request import ProvisioningRequest, VMType

__all__ = [
    "AssemblyResult",
    "ConfigAssembler",
    "IgnitionBuilder",
    "IgnitionConfig",
    "ProvisioningRequest",
    "VMType",
]
