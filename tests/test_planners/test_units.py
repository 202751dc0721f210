"""Tests for unit planning."""

from kindle.planners.units import get_units


AUTOLOGIN = "[Service]\nExecStart=\nExecStart=-/usr/sbin/agetty --autologin root --noclear %I $TERM\n"


class TestGetUnits:
    """Test get_units."""

    def test_fixed_units_in_order(self):
        units = get_units(False)

        assert [u.name for u in units] == [
            "podman.socket",
            "docker.service",
            "docker.socket",
            "zincati.service",
            "serial-getty@.service",
            "getty@.service",
        ]

    def test_enable_and_mask_flags(self):
        units = {u.name: u for u in get_units(False)}

        assert units["podman.socket"].enabled is True
        assert units["podman.socket"].mask is None
        assert units["docker.service"].enabled is False
        assert units["docker.service"].mask is True
        assert units["docker.socket"].mask is True
        assert units["zincati.service"].enabled is False
        assert units["zincati.service"].mask is None

    def test_autologin_dropins(self):
        units = {u.name: u for u in get_units(False)}

        for name in ("serial-getty@.service", "getty@.service"):
            dropins = units[name].dropins
            assert len(dropins) == 1
            assert dropins[0].name == "10-autologin.conf"
            assert dropins[0].contents == AUTOLOGIN
            assert units[name].enabled is None

    def test_net_recovery_unit(self):
        units = get_units(True)
        recovery = units[-1]

        assert len(units) == 7
        assert recovery.name == "net-health-recovery.service"
        assert recovery.enabled is True
        assert "ExecStart=/usr/local/bin/net-health-recovery.sh\n" in recovery.contents
        assert "[Install]\nWantedBy=default.target\n" in recovery.contents
