"""Directories that must exist before files are written."""

from typing import List

from kindle.models.ignition import Directory, node_group, node_user


REGISTRIES_CONF_DIR = "/etc/containers/registries.conf.d"
SYSTEM_CONF_DIR = "/etc/systemd/system.conf.d"
ENVIRONMENT_DIR = "/etc/environment.d"


def home_config_dirs(user_name: str) -> List[str]:
    """User config tree, parents first."""
    config = f"/home/{user_name}/.config"
    return [
        config,
        f"{config}/containers",
        f"{config}/systemd",
        f"{config}/systemd/user",
        f"{config}/systemd/user/default.target.wants",
    ]


def get_dirs(user_name: str) -> List[Directory]:
    """Build the ordered directory list.

    Ignition creates directories in list order and makes any missing
    parent root-owned, so every level of the home tree is listed
    explicitly before its children.
    """
    dirs = [
        Directory(
            path=path,
            user=node_user(user_name),
            group=node_group(user_name),
            mode=0o755,
        )
        for path in home_config_dirs(user_name)
    ]

    for path in (REGISTRIES_CONF_DIR, SYSTEM_CONF_DIR, ENVIRONMENT_DIR):
        dirs.append(
            Directory(path=path, user=node_user("root"), group=node_group("root"), mode=0o755)
        )

    return dirs
