"""systemd units for the descriptor."""

from typing import List

from kindle.models.ignition import Dropin, Unit
from kindle.utils.unitfile import UnitFile, net_recovery_unit_file


NET_RECOVERY_UNIT = "net-health-recovery.service"
AUTOLOGIN_DROPIN = "10-autologin.conf"
GETTY_UNITS = ["serial-getty@.service", "getty@.service"]


def autologin_dropin() -> UnitFile:
    """Root autologin on the console; the VM console is only reachable from the host."""
    dropin = UnitFile()
    dropin.add("Service", "ExecStart", "")
    dropin.add("Service", "ExecStart", "-/usr/sbin/agetty --autologin root --noclear %I $TERM")
    return dropin


def get_units(net_recover: bool) -> List[Unit]:
    units = [
        Unit(name="podman.socket", enabled=True),
        Unit(name="docker.service", enabled=False, mask=True),
        Unit(name="docker.socket", enabled=False, mask=True),
        # Keep the base image from updating itself underneath the engine.
        Unit(name="zincati.service", enabled=False),
    ]

    autologin = autologin_dropin().to_string()
    for getty in GETTY_UNITS:
        units.append(Unit(name=getty, dropins=[Dropin(name=AUTOLOGIN_DROPIN, contents=autologin)]))

    if net_recover:
        units.append(
            Unit(
                name=NET_RECOVERY_UNIT,
                enabled=True,
                contents=net_recovery_unit_file().to_string(),
            )
        )

    return units
