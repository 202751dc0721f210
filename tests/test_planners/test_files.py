"""Tests for file planning."""

from kindle.models.request import VMType
from kindle.planners.diagnostics import Diagnostics
from kindle.planners.files import get_files, sub_id_range
from kindle.utils.dataurl import decode_data_url


BASE_PATHS = [
    "/home/core/.config/systemd/user/linger-example.service",
    "/home/core/.config/containers/containers.conf",
    "/etc/subuid",
    "/etc/subgid",
    "/etc/systemd/system/user@.service.d/delegate.conf",
    "/var/lib/systemd/linger/core",
    "/etc/containers/containers.conf",
    "/etc/containers/podman-machine",
    "/etc/sysctl.d/10-inotify-instances.conf",
    "/etc/containers/registries.conf.d/999-podman-machine.conf",
    "/etc/tmpfiles.d/podman-docker.conf",
    "/etc/profile.d/docker-host.sh",
]

TAIL_PATHS = [
    "/etc/chrony.conf",
    "/etc/chrony.d/50-podman-makestep.conf",
]

SSL_PATHS = [
    "/etc/systemd/system.conf.d/podman-machine-ssl.conf",
    "/etc/environment.d/podman-machine-ssl.conf",
    "/etc/profile.d/podman-machine-ssl.sh",
]


def _files(host, user="core", uid=501, rootful=False, vm_type=VMType.QEMU, net_recover=False):
    diagnostics = Diagnostics()
    files = get_files(user, uid, rootful, vm_type, net_recover, host, diagnostics)
    return files, diagnostics


def _by_path(files):
    return {f.path: f for f in files}


def _text(f):
    return decode_data_url(f.contents.source)


class TestSubIdRange:
    """Test subordinate id allocation."""

    def test_below_range(self):
        assert sub_id_range(5) == (100000, 1000000)

    def test_inside_range_shifts(self):
        assert sub_id_range(100050) == (100051, 1000000)
        assert sub_id_range(100000) == (100001, 1000000)
        assert sub_id_range(1099999) == (1100000, 1000000)

    def test_above_range(self):
        assert sub_id_range(1100000) == (100000, 1000000)
        assert sub_id_range(2000000) == (100000, 1000000)


class TestGetFiles:
    """Test get_files."""

    def test_order_without_extras(self, host):
        files, diagnostics = _files(host)

        assert [f.path for f in files] == BASE_PATHS + TAIL_PATHS
        assert diagnostics.warnings == []
        assert diagnostics.degraded is False

    def test_user_files(self, host):
        files = _by_path(_files(host, user="alice", uid=1000)[0])

        linger_unit = files["/home/alice/.config/systemd/user/linger-example.service"]
        assert linger_unit.user.name == "alice"
        assert linger_unit.mode == 0o744
        assert "ExecStart=/usr/bin/sleep infinity" in _text(linger_unit)

        conf = files["/home/alice/.config/containers/containers.conf"]
        assert _text(conf) == '[containers]\nnetns="bridge"\npids_limit=0\n'
        assert conf.mode == 0o744

        linger = files["/var/lib/systemd/linger/alice"]
        assert linger.contents is None
        assert linger.user.name == "alice"
        assert linger.mode == 0o644

    def test_subuid_subgid(self, host):
        files = _by_path(_files(host, user="alice", uid=100050)[0])

        for path in ("/etc/subuid", "/etc/subgid"):
            assert _text(files[path]) == "alice:100051:1000000"
            assert files[path].overwrite is True
            assert files[path].user.name == "root"
            assert files[path].mode == 0o744

    def test_machine_marker(self, host):
        files = _by_path(_files(host, vm_type=VMType.APPLEHV)[0])

        assert _text(files["/etc/containers/podman-machine"]) == "applehv\n"
        assert _text(files["/etc/containers/containers.conf"]) == "[engine]\nmachine_enabled=true\n"
        assert _text(files["/etc/systemd/system/user@.service.d/delegate.conf"]) == (
            "[Service]\nDelegate=memory pids cpu io\n"
        )

    def test_docker_socket_rootless(self, host):
        files = _by_path(_files(host, uid=1000, rootful=False)[0])
        tmpfiles = files["/etc/tmpfiles.d/podman-docker.conf"]

        assert "/run/user/1000/podman/podman.sock" in _text(tmpfiles)
        assert tmpfiles.user is None
        assert tmpfiles.mode == 0o644

    def test_docker_socket_rootful(self, host):
        files = _by_path(_files(host, uid=1000, rootful=True)[0])

        assert "/run/podman/podman.sock" in _text(files["/etc/tmpfiles.d/podman-docker.conf"])

    def test_docker_host_profile(self, host):
        files = _by_path(_files(host)[0])

        assert _text(files["/etc/profile.d/docker-host.sh"]) == (
            'export DOCKER_HOST="unix://$(podman info -f "{{.Host.RemoteSocket.Path}}")"\n'
        )

    def test_chrony(self, host):
        files = _by_path(_files(host)[0])

        chrony = files["/etc/chrony.conf"]
        assert chrony.contents is None
        assert [decode_data_url(r.source) for r in chrony.append] == ["\nconfdir /etc/chrony.d\n"]
        assert _text(files["/etc/chrony.d/50-podman-makestep.conf"]) == "makestep 1 -1\n"

    def test_net_recovery_script(self, host):
        files, _ = _files(host, net_recover=True)

        script = files[-1]
        assert script.path == "/usr/local/bin/net-health-recovery.sh"
        assert script.mode == 0o755
        assert script.user.name == "root"
        assert _text(script).startswith("#!/bin/bash")

    def test_home_dir_failure_truncates(self, fake_host_class):
        host = fake_host_class(home_error=RuntimeError("no home"))

        files, diagnostics = _files(host, net_recover=True)

        assert [f.path for f in files] == BASE_PATHS
        assert diagnostics.degraded is True
        assert "no home" in diagnostics.warnings[0]

    def test_user_certs(self, host, home_dir):
        podman_certs = home_dir / ".config/containers/certs.d/registry.local"
        podman_certs.mkdir(parents=True)
        (podman_certs / "ca.crt").write_text("podman")
        docker_certs = home_dir / ".config/docker/certs.d/docker.local"
        docker_certs.mkdir(parents=True)
        (docker_certs / "ca.crt").write_text("docker")

        files, _ = _files(host)
        paths = [f.path for f in files]

        assert paths[len(BASE_PATHS):len(BASE_PATHS) + 2] == [
            "/etc/containers/certs.d/registry.local/ca.crt",
            "/etc/containers/certs.d/docker.local/ca.crt",
        ]
        assert not set(SSL_PATHS) & set(paths)

    def test_ssl_cert_file_env(self, fake_host_class, home_dir, tmp_path):
        bundle = tmp_path / "bundle.pem"
        bundle.write_text("bundle")
        host = fake_host_class(home=home_dir, env={"SSL_CERT_FILE": str(bundle)})

        files, _ = _files(host)
        paths = [f.path for f in files]

        assert paths[len(BASE_PATHS):-len(TAIL_PATHS)] == ["/etc/containers/certs.d/bundle.pem"] + SSL_PATHS
        for f in files:
            if f.path in SSL_PATHS:
                assert "SSL_CERT_FILE" in _text(f)
                assert "SSL_CERT_DIR" not in _text(f)

    def test_ssl_cert_dir_env(self, fake_host_class, home_dir, tmp_path):
        certs = tmp_path / "extra"
        certs.mkdir()
        (certs / "one.pem").write_text("1")
        host = fake_host_class(home=home_dir, env={"SSL_CERT_DIR": str(certs)})

        files, _ = _files(host)
        paths = [f.path for f in files]

        assert paths[len(BASE_PATHS):-len(TAIL_PATHS)] == ["/etc/containers/certs.d/one.pem"] + SSL_PATHS
        for f in files:
            if f.path in SSL_PATHS:
                assert "SSL_CERT_DIR" in _text(f)
                assert "SSL_CERT_FILE" not in _text(f)

    def test_invalid_ssl_env_paths_are_skipped(self, fake_host_class, home_dir, tmp_path):
        host = fake_host_class(
            home=home_dir,
            env={"SSL_CERT_FILE": str(tmp_path / "nope.pem"), "SSL_CERT_DIR": str(tmp_path / "nope")},
        )

        files, diagnostics = _files(host)

        assert [f.path for f in files] == BASE_PATHS + TAIL_PATHS
        assert len(diagnostics.warnings) == 2
        assert diagnostics.degraded is False

    def test_only_the_valid_ssl_variable_is_exported(self, fake_host_class, home_dir, tmp_path):
        bundle = tmp_path / "bundle.pem"
        bundle.write_text("bundle")
        host = fake_host_class(
            home=home_dir,
            env={"SSL_CERT_FILE": str(bundle), "SSL_CERT_DIR": str(tmp_path / "nope")},
        )

        files, diagnostics = _files(host)
        ssl_files = [f for f in files if f.path in SSL_PATHS]

        assert [f.path for f in ssl_files] == SSL_PATHS
        for f in ssl_files:
            assert "SSL_CERT_FILE" in _text(f)
            assert "SSL_CERT_DIR" not in _text(f)
        assert len(diagnostics.warnings) == 1
        assert "SSL_CERT_DIR" in diagnostics.warnings[0]
