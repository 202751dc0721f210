"""Provisioning request model."""

from enum import Enum
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator


DEFAULT_USER_NAME = "core"


class VMType(str, Enum):
    """Hypervisor kind the machine runs under."""
    QEMU = "qemu"
    WSL = "wsl"
    APPLEHV = "applehv"
    HYPERV = "hyperv"
    LIBKRUN = "libkrun"
    UNKNOWN = "unknown"

    def __str__(self) -> str:
        return self.value


class ProvisioningRequest(BaseModel):
    """Machine parameters for one descriptor assembly."""
    name: str = Field(default="", description="Login name, defaults to core")
    key: str = Field(default="", description="SSH public key")
    time_zone: str = Field(default="", description="'local', an IANA zone, or empty")
    uid: int = Field(default=1000, ge=0)
    vm_name: str = Field(default="")
    vm_type: VMType = Field(default=VMType.QEMU)
    write_path: Optional[str] = Field(default=None, description="Descriptor output path")
    rootful: bool = Field(default=False)
    net_recover: bool = Field(default=False)

    model_config = ConfigDict(frozen=True, extra="forbid")

    @field_validator("vm_type", mode="before")
    @classmethod
    def normalize_vm_type(cls, v):
        """Accept VM kinds case-insensitively."""
        if isinstance(v, str):
            return v.lower()
        return v

    @property
    def user_name(self) -> str:
        """Login name with the default applied."""
        return self.name or DEFAULT_USER_NAME
