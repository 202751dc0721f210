"""Symlinks for the descriptor."""

import posixpath
from typing import List

from kindle.models.ignition import Link, node_group, node_user


LINGER_EXAMPLE_UNIT = "linger-example.service"
ZONEINFO_DIR = "/usr/share/zoneinfo"


def user_unit_dir(user_name: str) -> str:
    return f"/home/{user_name}/.config/systemd/user"


def get_links(user_name: str) -> List[Link]:
    unit_dir = user_unit_dir(user_name)
    return [
        Link(
            path=f"{unit_dir}/default.target.wants/{LINGER_EXAMPLE_UNIT}",
            user=node_user(user_name),
            group=node_group(user_name),
            hard=False,
            target=f"{unit_dir}/{LINGER_EXAMPLE_UNIT}",
        ),
        Link(
            path="/usr/local/bin/docker",
            user=node_user("root"),
            group=node_group("root"),
            overwrite=True,
            hard=False,
            target="/usr/bin/podman",
        ),
    ]


def zoneinfo_target(zone: str) -> str:
    """Path of ``zone`` in the guest's zoneinfo database.

    Zone names resolved on a host with ``\\`` separators are converted,
    since the guest is always Linux.
    """
    return posixpath.normpath(ZONEINFO_DIR + "/" + zone.replace("\\", "/"))


def get_timezone_link(zone: str) -> Link:
    return Link(
        path="/etc/localtime",
        user=node_user("root"),
        group=node_group("root"),
        overwrite=False,
        hard=False,
        target=zoneinfo_target(zone),
    )
