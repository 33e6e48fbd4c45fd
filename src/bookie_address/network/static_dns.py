"""In-memory DNS doubles for tests and offline use.

Each double records the arguments it was called with in ``calls`` so tests
can assert how often the network stack was consulted.
"""

from __future__ import annotations

from bookie_address.core.errors import LookupFailure
from bookie_address.core.interfaces.dns import DefaultIPProvider, HostnameResolver


class StaticDefaultIPProvider(DefaultIPProvider):
    """Returns a fixed IP, or a per-selector IP from a mapping.

    With a mapping, unknown selectors raise :class:`LookupFailure`.
    """

    def __init__(self, addresses: str | dict[str, str]) -> None:
        self._addresses = addresses
        self.calls: list[str] = []

    def get_default_ip(self, service_selector: str) -> str:
        self.calls.append(service_selector)
        if isinstance(self._addresses, str):
            return self._addresses
        try:
            return self._addresses[service_selector]
        except KeyError:
            raise LookupFailure(service_selector, "no address configured") from None


class FailingDefaultIPProvider(DefaultIPProvider):
    """Always raises :class:`LookupFailure`."""

    def __init__(self, reason: str = "network unreachable") -> None:
        self._reason = reason
        self.calls: list[str] = []

    def get_default_ip(self, service_selector: str) -> str:
        self.calls.append(service_selector)
        raise LookupFailure(service_selector, self._reason)


class StaticHostnameResolver(HostnameResolver):
    """Reverse lookups answered from an ``ip -> hostname`` mapping."""

    def __init__(self, hostnames: dict[str, str]) -> None:
        self._hostnames = dict(hostnames)
        self.calls: list[str] = []

    def get_hostname(self, ip: str) -> str:
        self.calls.append(ip)
        try:
            return self._hostnames[ip]
        except KeyError:
            raise LookupFailure(ip, "no hostname configured") from None
