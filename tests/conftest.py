"""Shared fixtures."""

from pathlib import Path
from typing import Dict, Optional

import pytest

from kindle.errors import TimeZoneResolutionError
from kindle.providers.base import HostProvider


class FakeHost(HostProvider):
    """Deterministic host for planner and assembler tests."""

    def __init__(
        self,
        home: Optional[Path] = None,
        timezone: str = "Europe/Berlin",
        env: Optional[Dict[str, str]] = None,
        home_error: Optional[Exception] = None,
        tz_error: Optional[Exception] = None,
    ):
        self.home = home
        self.timezone = timezone
        self.env = env or {}
        self.home_error = home_error
        self.tz_error = tz_error

    def home_dir(self) -> Path:
        if self.home_error is not None:
            raise self.home_error
        return self.home

    def local_timezone(self) -> str:
        if self.tz_error is not None:
            raise self.tz_error
        return self.timezone

    def getenv(self, name: str) -> Optional[str]:
        return self.env.get(name)


@pytest.fixture
def home_dir(tmp_path):
    """An empty home directory."""
    home = tmp_path / "home"
    home.mkdir()
    return home


@pytest.fixture
def host(home_dir):
    """A host with an empty home directory and no SSL variables."""
    return FakeHost(home=home_dir)


@pytest.fixture
def fake_host_class():
    return FakeHost


@pytest.fixture
def broken_timezone_host(home_dir):
    return FakeHost(home=home_dir, tz_error=TimeZoneResolutionError("no zone"))
