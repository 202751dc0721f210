"""Planners deciding which entries go into the descriptor."""

from kindle.planners.certs import get_certs
from kindle.planners.diagnostics import Diagnostics
from kindle.planners.directories import get_dirs
from kindle.planners.files import get_files
from kindle.planners.links import get_links, get_timezone_link
from kindle.planners.ssl_env import get_ssl_environment_files
from kindle.planners.units import get_units
from kindle.planners.users import get_users

__all__ = [
    "Diagnostics",
    "get_certs",
    "get_dirs",
    "get_files",
    "get_links",
    "get_timezone_link",
    "get_ssl_environment_files",
    "get_units",
    "get_users",
]
