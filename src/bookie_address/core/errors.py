"""Exception taxonomy for address resolution."""

from __future__ import annotations


class AddressResolutionError(Exception):
    """Base class for every failure raised while resolving a bookie address."""


class UnsafeLoopbackAddress(AddressResolutionError):
    """An explicitly advertised address is loopback and loopback is not allowed."""

    def __init__(self, address: str) -> None:
        self.address = address
        super().__init__(
            f"Advertised address {address!r} is a loopback address, which is "
            "forbidden unless allow_loopback is enabled"
        )


class LookupFailure(AddressResolutionError):
    """The local network stack could not produce an address for *target*.

    *target* is the service selector for default-IP lookups, or the IP
    address for reverse (hostname) lookups.
    """

    def __init__(self, target: str, reason: str) -> None:
        self.target = target
        self.reason = reason
        super().__init__(f"Unable to resolve {target!r}: {reason}")


class InvalidConfiguration(ValueError):
    """A configuration source (file or environment variable) holds an unusable value.

    *source* names where the value came from, e.g. ``BOOKIE_PORT`` or the
    config file path.
    """

    def __init__(self, source: str, reason: str) -> None:
        self.source = source
        self.reason = reason
        super().__init__(f"{source}: {reason}")
