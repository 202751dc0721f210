"""Account entries for the descriptor."""

from typing import List

from kindle.models.ignition import PasswdUser
from kindle.models.request import DEFAULT_USER_NAME


ADMIN_GROUPS = ["sudo", "adm", "wheel", "systemd-journal"]


def get_users(name: str, key: str, uid: int) -> List[PasswdUser]:
    """Build the ordered account list.

    When ``name`` is not the image's default account, the default account
    is listed first with ``shouldExist: false`` so it is not created, and
    the requested account joins the administrative groups instead.
    """
    is_default_user = name == DEFAULT_USER_NAME
    users: List[PasswdUser] = []

    if not is_default_user:
        users.append(PasswdUser(name=DEFAULT_USER_NAME, should_exist=False))

    user = PasswdUser(name=name, ssh_authorized_keys=[key], uid=uid)
    if not is_default_user:
        user.groups = list(ADMIN_GROUPS)
    users.append(user)

    users.append(PasswdUser(name="root", ssh_authorized_keys=[key]))
    return users
