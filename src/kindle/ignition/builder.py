"""Incremental builder that finalizes the descriptor on disk."""

import logging
import os
import tempfile
from pathlib import Path
from typing import Optional, Union

from kindle.errors import BuildStateError, IgnitionWriteError
from kindle.ignition.assembler import ConfigAssembler
from kindle.ignition.result import AssemblyResult
from kindle.models.ignition import File, Unit
from kindle.models.request import ProvisioningRequest


logger = logging.getLogger(__name__)

IGNITION_FILE_MODE = 0o644


def ignition_file_path(vm_config_dir: Union[str, Path], vm_name: str) -> Path:
    """Where a machine's descriptor lives in its config directory."""
    return Path(vm_config_dir) / f"{vm_name}.ign"


class IgnitionBuilder:
    """Holds one assembled descriptor until it is written.

    Collaborators may add units and files after :meth:`generate`. The
    descriptor is then finalized exactly once, either by :meth:`build` or
    by :meth:`build_with_ignition_file`. Not thread-safe.
    """

    def __init__(
        self,
        request: ProvisioningRequest,
        assembler: Optional[ConfigAssembler] = None,
    ):
        self.request = request
        self.assembler = assembler or ConfigAssembler()
        self.result: Optional[AssemblyResult] = None
        self._finalized = False

    @property
    def write_path(self) -> Path:
        if not self.request.write_path:
            raise BuildStateError("No output path configured for the ignition file")
        return Path(self.request.write_path)

    def generate(self) -> AssemblyResult:
        self._check_not_finalized()
        self.result = self.assembler.assemble(self.request)
        return self.result

    def with_unit(self, *units: Unit) -> None:
        """Append systemd units to the generated descriptor."""
        self._check_not_finalized()
        self._assembled().config.systemd.units.extend(units)

    def with_file(self, *files: File) -> None:
        """Append storage files to the generated descriptor."""
        self._check_not_finalized()
        self._assembled().config.storage.files.extend(files)

    def build(self) -> Path:
        """Serialize the generated descriptor to the output path."""
        result = self._assembled()
        self._check_not_finalized()
        try:
            payload = result.config.to_json().encode("utf-8")
        except (TypeError, ValueError) as e:
            raise IgnitionWriteError(f"Unable to serialize ignition config: {e}") from e

        logger.debug(f"writing ignition file to {str(self.write_path)!r}")
        self._write(payload)
        return self.write_path

    def build_with_ignition_file(self, ign_path: Union[str, Path]) -> Path:
        """Copy a caller-supplied descriptor to the output path as-is."""
        self._check_not_finalized()
        try:
            payload = Path(ign_path).read_bytes()
        except OSError as e:
            raise IgnitionWriteError(f"Unable to read ignition file {ign_path}: {e}") from e

        logger.debug(f"copying ignition file {str(ign_path)!r} to {str(self.write_path)!r}")
        self._write(payload)
        return self.write_path

    def _write(self, payload: bytes) -> None:
        """Write through a sibling temp file so a failure leaves nothing behind."""
        target = self.write_path
        tmp_name = None
        try:
            fd, tmp_name = tempfile.mkstemp(dir=target.parent, prefix=f".{target.name}.")
            with os.fdopen(fd, "wb") as f:
                f.write(payload)
            os.chmod(tmp_name, IGNITION_FILE_MODE)
            os.replace(tmp_name, target)
        except OSError as e:
            if tmp_name and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise IgnitionWriteError(f"Unable to write ignition file {target}: {e}") from e
        self._finalized = True

    def _assembled(self) -> AssemblyResult:
        if self.result is None:
            raise BuildStateError("Ignition config has not been generated yet")
        return self.result

    def _check_not_finalized(self) -> None:
        if self._finalized:
            raise BuildStateError(f"Ignition file {self.write_path} was already written")
