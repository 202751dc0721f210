"""Exceptions raised when a descriptor cannot be produced."""


class IgnitionError(Exception):
    """Base class for fatal assembly and build failures."""


class TimeZoneResolutionError(IgnitionError):
    """The host time zone was requested but could not be determined."""


class IgnitionWriteError(IgnitionError):
    """The descriptor could not be serialized or persisted."""


class BuildStateError(IgnitionError):
    """A builder operation was called out of order."""
