"""Descriptor assembly and persistence."""

from kindle.ignition.assembler import ConfigAssembler
from kindle.ignition.builder import IgnitionBuilder, ignition_file_path
from kindle.ignition.result import AssemblyResult

__all__ = ["ConfigAssembler", "IgnitionBuilder", "ignition_file_path", "AssemblyResult"]
