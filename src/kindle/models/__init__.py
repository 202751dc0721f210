"""Pydantic models for the descriptor, requests and configuration."""

from kindle.models.config import KindleConfig, USER_CERTS_TARGET_PATH
from kindle.models.ignition import (
    IGNITION_VERSION,
    Directory,
    Dropin,
    File,
    IgnitionConfig,
    Link,
    NodeGroup,
    NodeUser,
    PasswdUser,
    Resource,
    Unit,
    node_group,
    node_user,
)
from kindle.models.request import DEFAULT_USER_NAME, ProvisioningRequest, VMType

__all__ = [
    "KindleConfig",
    "USER_CERTS_TARGET_PATH",
    "IGNITION_VERSION",
    "Directory",
    "Dropin",
    "File",
    "IgnitionConfig",
    "Link",
    "NodeGroup",
    "NodeUser",
    "PasswdUser",
    "Resource",
    "Unit",
    "node_group",
    "node_user",
    "DEFAULT_USER_NAME",
    "ProvisioningRequest",
    "VMType",
]
