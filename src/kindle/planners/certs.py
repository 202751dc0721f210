"""Copy host certificates into the descriptor."""

import logging
import os
import posixpath
from pathlib import Path
from typing import List, Optional, Union

from kindle.models.config import USER_CERTS_TARGET_PATH
from kindle.models.ignition import File, Resource, node_group, node_user
from kindle.planners.diagnostics import Diagnostics
from kindle.utils.dataurl import encode_data_url


logger = logging.getLogger(__name__)


def prepare_cert_file(
    source: Path,
    name: str,
    diagnostics: Diagnostics,
    target_root: str = USER_CERTS_TARGET_PATH,
) -> Optional[File]:
    """Embed one certificate, or return None if it cannot be read."""
    try:
        data = source.read_bytes()
    except OSError as e:
        diagnostics.warn(f"Unable to read cert file {source}: {e}", logger)
        return None

    # The guest is always Linux, so join with POSIX separators.
    target_path = posixpath.join(target_root, name)
    logger.debug(f"Copying cert file from '{source}' to '{target_path}'.")

    return File(
        path=target_path,
        user=node_user("root"),
        group=node_group("root"),
        contents=Resource(source=encode_data_url(data)),
        mode=0o644,
    )


def get_certs(
    source: Union[str, Path],
    is_dir: bool,
    diagnostics: Diagnostics,
    target_root: str = USER_CERTS_TARGET_PATH,
) -> List[File]:
    """Collect certificates from a directory tree or a single file.

    Tree mode keeps each file's path relative to ``source``; a missing
    tree yields no files. Single-file mode uses the file's base name.
    """
    source = Path(source)
    files: List[File] = []

    if not is_dir:
        cert = prepare_cert_file(source, source.name, diagnostics, target_root)
        if cert is not None:
            files.append(cert)
        return files

    def on_error(e: OSError):
        if isinstance(e, FileNotFoundError) and Path(e.filename) == source:
            logger.debug(f"No certs directory at {source}")
            return
        diagnostics.warn(
            f"Unable to copy certs via ignition, error while reading certs from {source}: {e}",
            logger,
        )

    for dirpath, dirnames, filenames in os.walk(source, onerror=on_error):
        dirnames.sort()
        # os.walk does not descend into linked directories
        for dirname in dirnames:
            linked = Path(dirpath, dirname)
            if linked.is_symlink():
                diagnostics.warn(f"Skipping linked certs directory {linked}", logger)
        for filename in sorted(filenames):
            path = Path(dirpath, filename)
            relative = path.relative_to(source).as_posix()
            cert = prepare_cert_file(path, relative, diagnostics, target_root)
            if cert is not None:
                files.append(cert)

    return files
