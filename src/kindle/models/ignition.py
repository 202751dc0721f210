"""Ignition descriptor models (schema version 3.2.0)."""

from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field


IGNITION_VERSION = "3.2.0"


class _IgnitionModel(BaseModel):
    """Base for descriptor models: camelCase aliases, no unknown keys."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)


class NodeUser(_IgnitionModel):
    """Owner of a storage node."""
    name: Optional[str] = None
    id: Optional[int] = None


class NodeGroup(_IgnitionModel):
    """Group of a storage node."""
    name: Optional[str] = None
    id: Optional[int] = None


class Resource(_IgnitionModel):
    """Inline content reference for a file."""
    source: Optional[str] = None


class Node(_IgnitionModel):
    """Fields shared by directories, files and links."""
    path: str = Field(..., description="Absolute path in the guest")
    user: Optional[NodeUser] = None
    group: Optional[NodeGroup] = None
    overwrite: Optional[bool] = None


class Directory(Node):
    """Directory to create."""
    mode: Optional[int] = None


class File(Node):
    """File to write, either replaced (contents) or appended to."""
    contents: Optional[Resource] = None
    append: Optional[List[Resource]] = None
    mode: Optional[int] = None


class Link(Node):
    """Hard or symbolic link."""
    target: str = Field(..., description="Link target")
    hard: Optional[bool] = None


class Storage(_IgnitionModel):
    directories: List[Directory] = Field(default_factory=list)
    files: List[File] = Field(default_factory=list)
    links: List[Link] = Field(default_factory=list)


class PasswdUser(_IgnitionModel):
    """OS account entry."""
    name: str
    ssh_authorized_keys: Optional[List[str]] = Field(None, alias="sshAuthorizedKeys")
    uid: Optional[int] = None
    groups: Optional[List[str]] = None
    should_exist: Optional[bool] = Field(None, alias="shouldExist")


class Passwd(_IgnitionModel):
    users: List[PasswdUser] = Field(default_factory=list)


class Dropin(_IgnitionModel):
    """Named fragment extending a unit."""
    name: str
    contents: Optional[str] = None


class Unit(_IgnitionModel):
    """systemd unit entry."""
    name: str
    enabled: Optional[bool] = None
    mask: Optional[bool] = None
    contents: Optional[str] = None
    dropins: Optional[List[Dropin]] = None


class Systemd(_IgnitionModel):
    units: List[Unit] = Field(default_factory=list)


class IgnitionVersion(_IgnitionModel):
    version: str = IGNITION_VERSION


class IgnitionConfig(_IgnitionModel):
    """The complete first-boot descriptor."""
    ignition: IgnitionVersion = Field(default_factory=IgnitionVersion)
    passwd: Passwd = Field(default_factory=Passwd)
    storage: Storage = Field(default_factory=Storage)
    systemd: Systemd = Field(default_factory=Systemd)

    def to_dict(self) -> dict:
        """Return the JSON-ready mapping, omitting unset fields."""
        return self.model_dump(by_alias=True, exclude_none=True)

    def to_json(self) -> str:
        """Serialize to the compact JSON document written to disk."""
        return self.model_dump_json(by_alias=True, exclude_none=True)


def node_user(name: str) -> NodeUser:
    """Shorthand for an owner reference by name."""
    return NodeUser(name=name)


def node_group(name: str) -> NodeGroup:
    """Shorthand for a group reference by name."""
    return NodeGroup(name=name)
