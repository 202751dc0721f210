"""Export SSL_CERT_FILE / SSL_CERT_DIR to every process in the guest."""

import json
import posixpath
from pathlib import PurePath
from typing import List, Optional, Tuple

from kindle.models.config import USER_CERTS_TARGET_PATH
from kindle.models.ignition import File, Resource, node_group, node_user
from kindle.utils.dataurl import encode_data_url
from kindle.utils.templates import render_template


SSL_CERT_FILE = "SSL_CERT_FILE"
SSL_CERT_DIR = "SSL_CERT_DIR"

SYSTEMD_SSL_CONF = "/etc/systemd/system.conf.d/podman-machine-ssl.conf"
ENVD_SSL_CONF = "/etc/environment.d/podman-machine-ssl.conf"
PROFILE_SSL_CONF = "/etc/profile.d/podman-machine-ssl.sh"

# The service manager, environment.d and login shells each need their own syntax.
_SYSTEMD_TEMPLATE = (
    "[Manager]\n"
    "{% for name, value in env %}DefaultEnvironment={{ name }}={{ value }}\n{% endfor %}"
)
_ENVD_TEMPLATE = "{% for name, value in env %}{{ name }}={{ value }}\n{% endfor %}"
_PROFILE_TEMPLATE = "{% for name, value in env %}export {{ name }}={{ value }}\n{% endfor %}"


def ssl_environment(
    ssl_file_name: Optional[str],
    ssl_dir_name: Optional[str],
    target_root: str = USER_CERTS_TARGET_PATH,
) -> List[Tuple[str, str]]:
    """Variable assignments pointing at where the certs land in the guest.

    Values are double-quoted. The file keeps only its base name, as that
    is where the certificate collector copies it.
    """
    env = []
    if ssl_file_name:
        target = posixpath.join(target_root, PurePath(ssl_file_name).name)
        env.append((SSL_CERT_FILE, json.dumps(target, ensure_ascii=False)))
    if ssl_dir_name:
        env.append((SSL_CERT_DIR, json.dumps(target_root, ensure_ascii=False)))
    return env


def get_ssl_environment_files(
    ssl_file_name: Optional[str],
    ssl_dir_name: Optional[str],
    target_root: str = USER_CERTS_TARGET_PATH,
) -> List[File]:
    """Three files carrying the same assignments for three launch paths."""
    if not ssl_file_name and not ssl_dir_name:
        raise ValueError("SSL environment needs a cert file or a cert directory")

    env = ssl_environment(ssl_file_name, ssl_dir_name, target_root)
    return [
        get_ssl_file(SYSTEMD_SSL_CONF, render_template(_SYSTEMD_TEMPLATE, env=env)),
        get_ssl_file(ENVD_SSL_CONF, render_template(_ENVD_TEMPLATE, env=env)),
        get_ssl_file(PROFILE_SSL_CONF, render_template(_PROFILE_TEMPLATE, env=env)),
    ]


def get_ssl_file(path: str, content: str) -> File:
    return File(
        path=path,
        user=node_user("root"),
        group=node_group("root"),
        contents=Resource(source=encode_data_url(content)),
        mode=0o644,
    )
