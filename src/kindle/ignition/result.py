"""Outcome of one descriptor assembly."""

from dataclasses import dataclass, field
from typing import List

from kindle.models.ignition import IgnitionConfig


@dataclass
class AssemblyResult:
    """A descriptor plus the non-fatal problems met while building it.

    Fatal problems are raised as ``IgnitionError`` instead, so holding a
    result always means a descriptor exists. ``degraded`` is set when a
    planner returned early and entries are missing.
    """
    config: IgnitionConfig
    warnings: List[str] = field(default_factory=list)
    degraded: bool = False

    @property
    def ok(self) -> bool:
        return not self.degraded and not self.warnings
