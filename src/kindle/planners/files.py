"""Inline files for the descriptor."""

import logging
from pathlib import Path
from typing import List, Optional, Tuple

from kindle.models.config import USER_CERTS_TARGET_PATH
from kindle.models.ignition import File, Resource, node_group, node_user
from kindle.models.request import VMType
from kindle.planners.certs import get_certs
from kindle.planners.diagnostics import Diagnostics
from kindle.planners.links import LINGER_EXAMPLE_UNIT, user_unit_dir
from kindle.planners.ssl_env import SSL_CERT_DIR, SSL_CERT_FILE, get_ssl_environment_files
from kindle.providers.base import HostProvider
from kindle.utils.dataurl import encode_data_url
from kindle.utils.unitfile import (
    NET_RECOVERY_SCRIPT_PATH,
    linger_example_unit_file,
    net_recovery_script,
    podman_docker_tmp_config,
)


logger = logging.getLogger(__name__)

PODMAN_DOCKER_TMP_CONF_PATH = "/etc/tmpfiles.d/podman-docker.conf"

SUB_ID_BASE = 100000
SUB_ID_COUNT = 1000000

USER_CONTAINERS_CONF = """[containers]
netns="bridge"
pids_limit=0
"""

# machine_enabled is deprecated but still read by older podman packages.
ROOT_CONTAINERS_CONF = """[engine]
machine_enabled=true
"""

DELEGATE_CONF = """[Service]
Delegate=memory pids cpu io
"""

DOCKER_HOST_PROFILE = """export DOCKER_HOST="unix://$(podman info -f "{{.Host.RemoteSocket.Path}}")"
"""


def sub_id_range(uid: int) -> Tuple[int, int]:
    """Subordinate id base and count that never contain ``uid`` itself."""
    base = SUB_ID_BASE
    if SUB_ID_BASE <= uid < SUB_ID_BASE + SUB_ID_COUNT:
        base = uid + 1
    return base, SUB_ID_COUNT


def _inline_file(
    path: str,
    contents: Optional[str],
    owner: Optional[str] = "root",
    mode: Optional[int] = 0o644,
    overwrite: Optional[bool] = None,
) -> File:
    return File(
        path=path,
        user=node_user(owner) if owner else None,
        group=node_group(owner) if owner else None,
        overwrite=overwrite,
        contents=Resource(source=encode_data_url(contents)) if contents is not None else None,
        mode=mode,
    )


def get_files(
    user_name: str,
    uid: int,
    rootful: bool,
    vm_type: VMType,
    net_recover: bool,
    host: HostProvider,
    diagnostics: Diagnostics,
    certs_target_path: str = USER_CERTS_TARGET_PATH,
) -> List[File]:
    """Build the ordered file list.

    If the invoking user's home directory cannot be determined the list
    built so far is returned and the rest (certificates, chrony, network
    recovery) is dropped; this is reported through ``diagnostics``.
    """
    files: List[File] = []
    unit_dir = user_unit_dir(user_name)

    # Placeholder user service so the user's session bus gets started
    files.append(
        _inline_file(
            f"{unit_dir}/{LINGER_EXAMPLE_UNIT}",
            linger_example_unit_file().to_string(),
            owner=user_name,
            mode=0o744,
        )
    )
    files.append(
        _inline_file(
            f"/home/{user_name}/.config/containers/containers.conf",
            USER_CONTAINERS_CONF,
            owner=user_name,
            mode=0o744,
        )
    )

    base, count = sub_id_range(uid)
    sub_ids = f"{user_name}:{base}:{count}"
    for sub in ("/etc/subuid", "/etc/subgid"):
        files.append(_inline_file(sub, sub_ids, mode=0o744, overwrite=True))

    # cgroup v2 controllers for rootless containers
    files.append(_inline_file("/etc/systemd/system/user@.service.d/delegate.conf", DELEGATE_CONF))

    files.append(_inline_file(f"/var/lib/systemd/linger/{user_name}", None, owner=user_name))

    files.append(_inline_file("/etc/containers/containers.conf", ROOT_CONTAINERS_CONF))
    files.append(_inline_file("/etc/containers/podman-machine", f"{vm_type}\n"))
    files.append(
        _inline_file(
            "/etc/sysctl.d/10-inotify-instances.conf",
            "fs.inotify.max_user_instances=524288\n",
        )
    )
    # Remote clients cannot answer short-name prompts, so pin one search registry.
    files.append(
        _inline_file(
            "/etc/containers/registries.conf.d/999-podman-machine.conf",
            'unqualified-search-registries=["docker.io"]\n',
        )
    )
    files.append(
        _inline_file(
            PODMAN_DOCKER_TMP_CONF_PATH,
            podman_docker_tmp_config(uid, rootful, newline=True),
            owner=None,
        )
    )
    files.append(_inline_file("/etc/profile.d/docker-host.sh", DOCKER_HOST_PROFILE))

    try:
        user_home = host.home_dir()
    except (OSError, RuntimeError, KeyError) as e:
        diagnostics.degrade(f"Unable to copy certs via ignition {e}", logger)
        return files

    files.extend(get_certs(Path(user_home, ".config/containers/certs.d"), True, diagnostics, certs_target_path))
    files.extend(get_certs(Path(user_home, ".config/docker/certs.d"), True, diagnostics, certs_target_path))

    ssl_file_name = _existing_env_path(SSL_CERT_FILE, host, diagnostics)
    if ssl_file_name:
        files.extend(get_certs(ssl_file_name, False, diagnostics, certs_target_path))

    ssl_dir_name = _existing_env_path(SSL_CERT_DIR, host, diagnostics)
    if ssl_dir_name:
        files.extend(get_certs(ssl_dir_name, True, diagnostics, certs_target_path))

    if ssl_file_name or ssl_dir_name:
        files.extend(get_ssl_environment_files(ssl_file_name, ssl_dir_name, certs_target_path))

    files.append(
        File(
            path="/etc/chrony.conf",
            user=node_user("root"),
            group=node_group("root"),
            append=[Resource(source=encode_data_url("\nconfdir /etc/chrony.d\n"))],
        )
    )
    # Let chrony step the clock after the host slept for a long time.
    files.append(_inline_file("/etc/chrony.d/50-podman-makestep.conf", "makestep 1 -1\n", mode=None))

    if net_recover:
        files.append(_inline_file(NET_RECOVERY_SCRIPT_PATH, net_recovery_script(), mode=0o755))

    return files


def _existing_env_path(name: str, host: HostProvider, diagnostics: Diagnostics) -> Optional[str]:
    """Value of ``name`` if it names an existing path, else None."""
    value = host.getenv(name)
    if not value:
        return None
    if not Path(value).exists():
        diagnostics.warn(f"Invalid path in {name}: {value!r} does not exist", logger)
        return None
    return value
