"""Builder for systemd unit files and the fixed unit contents."""

from typing import Dict, List

from kindle.utils.templates import render_template


NET_RECOVERY_SCRIPT_PATH = "/usr/local/bin/net-health-recovery.sh"

_NET_RECOVERY_SCRIPT = """#!/bin/bash
# Verify network health, and bounce the network device if host connectivity
# is lost. This is a temporary workaround for a known rare qemu/virtio issue
# that affects some systems

sleep 120 # allow time for network setup on initial boot
while true; do
  sleep 30
  curl -s -o /dev/null --max-time 30 http://{{ gateway }}/health
  if [ "$?" != "0" ]; then
    echo "bouncing nic due to loss of connectivity with host"
    ifconfig {{ nic }} down; ifconfig {{ nic }} up
  fi
done
"""

_DOCKER_TMPFILES_LINE = "L+  /run/docker.sock   -    -    -     -   {{ socket }}"


class UnitFile:
    """Ordered INI-style unit: section -> key -> values.

    Sections and keys render in insertion order; adding an existing key
    again appends another ``Key=Value`` line rather than replacing it.
    """

    def __init__(self):
        self.sections: Dict[str, Dict[str, List[str]]] = {}

    def add(self, section: str, key: str, value: str) -> "UnitFile":
        self.sections.setdefault(section, {}).setdefault(key, []).append(value)
        return self

    def to_string(self) -> str:
        blocks = []
        for section, entries in self.sections.items():
            lines = [f"[{section}]"]
            for key, values in entries.items():
                lines.extend(f"{key}={value}" for value in values)
            blocks.append("\n".join(lines) + "\n")
        return "\n".join(blocks)

    def __str__(self) -> str:
        return self.to_string()


def linger_example_unit_file() -> UnitFile:
    """Placeholder user service that keeps the session bus alive."""
    unit = UnitFile()
    unit.add("Unit", "Description", "A systemd user unit demo")
    unit.add("Unit", "After", "network-online.target")
    unit.add("Unit", "Wants", "network-online.target podman.socket")
    unit.add("Service", "ExecStart", "/usr/bin/sleep infinity")
    return unit


def net_recovery_unit_file() -> UnitFile:
    unit = UnitFile()
    unit.add("Unit", "Description", "Verifies health of network and recovers if necessary")
    unit.add("Unit", "After", "sshd.socket sshd.service")
    unit.add("Service", "ExecStart", NET_RECOVERY_SCRIPT_PATH)
    unit.add("Service", "StandardOutput", "journal")
    unit.add("Service", "StandardError", "journal")
    unit.add("Service", "StandardInput", "null")
    unit.add("Install", "WantedBy", "default.target")
    return unit


def default_ready_unit_file() -> UnitFile:
    """Oneshot unit signalling the machine finished booting."""
    unit = UnitFile()
    unit.add("Unit", "After", "sshd.socket sshd.service")
    unit.add("Unit", "OnFailure", "emergency.target")
    unit.add("Unit", "OnFailureJobMode", "isolate")
    unit.add("Service", "Type", "oneshot")
    unit.add("Service", "RemainAfterExit", "yes")
    unit.add("Install", "RequiredBy", "default.target")
    return unit


def net_recovery_script(gateway: str = "192.168.127.1", nic: str = "enp0s1") -> str:
    return render_template(_NET_RECOVERY_SCRIPT, gateway=gateway, nic=nic)


def podman_socket_path(uid: int, rootful: bool) -> str:
    """Primary engine socket inside the guest."""
    if rootful:
        return "/run/podman/podman.sock"
    return f"/run/user/{uid}/podman/podman.sock"


def podman_docker_tmp_config(uid: int, rootful: bool, newline: bool = True) -> str:
    """tmpfiles.d line linking the docker socket to the podman socket."""
    line = render_template(_DOCKER_TMPFILES_LINE, socket=podman_socket_path(uid, rootful))
    return line + "\n" if newline else line
