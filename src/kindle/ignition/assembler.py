"""Assembles the first-boot descriptor from a provisioning request."""

import logging
from typing import Optional

from kindle.errors import TimeZoneResolutionError
from kindle.ignition.result import AssemblyResult
from kindle.models.config import USER_CERTS_TARGET_PATH
from kindle.models.ignition import (
    IgnitionConfig,
    IgnitionVersion,
    IGNITION_VERSION,
    Passwd,
    Storage,
    Systemd,
)
from kindle.models.request import ProvisioningRequest
from kindle.planners import (
    Diagnostics,
    get_dirs,
    get_files,
    get_links,
    get_timezone_link,
    get_units,
    get_users,
)
from kindle.providers import HostProvider, SystemHostProvider


logger = logging.getLogger(__name__)


class ConfigAssembler:
    """Runs every planner in order and merges the results."""

    def __init__(
        self,
        host: Optional[HostProvider] = None,
        certs_target_path: str = USER_CERTS_TARGET_PATH,
    ):
        self.host = host or SystemHostProvider()
        self.certs_target_path = certs_target_path

    def assemble(self, request: ProvisioningRequest) -> AssemblyResult:
        """Build the descriptor for ``request``.

        Raises TimeZoneResolutionError if the host time zone was asked for
        and cannot be found; every other problem ends up in the result's
        warnings.
        """
        name = request.user_name
        diagnostics = Diagnostics(logger)
        logger.debug(f"Assembling ignition config for machine {request.vm_name!r} (user {name})")

        users = get_users(name, request.key, request.uid)
        storage = Storage(
            directories=get_dirs(name),
            files=get_files(
                name,
                request.uid,
                request.rootful,
                request.vm_type,
                request.net_recover,
                self.host,
                diagnostics,
                self.certs_target_path,
            ),
            links=get_links(name),
        )

        if request.time_zone:
            storage.links.append(get_timezone_link(self.resolve_timezone(request.time_zone)))

        config = IgnitionConfig(
            ignition=IgnitionVersion(version=IGNITION_VERSION),
            passwd=Passwd(users=users),
            storage=storage,
            systemd=Systemd(units=get_units(request.net_recover)),
        )
        return AssemblyResult(
            config=config,
            warnings=list(diagnostics.warnings),
            degraded=diagnostics.degraded,
        )

    def resolve_timezone(self, time_zone: str) -> str:
        """'local' means whatever the host uses."""
        if time_zone != "local":
            return time_zone
        try:
            zone = self.host.local_timezone()
        except (OSError, ValueError) as e:
            raise TimeZoneResolutionError(f"Unable to determine the host time zone: {e}") from e
        logger.debug(f"Resolved local time zone to {zone}")
        return zone
