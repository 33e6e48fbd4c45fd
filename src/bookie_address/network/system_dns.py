"""Default-IP and hostname lookups against the local network stack.

The ``default`` selector asks for the address the local hostname resolves
to.  Any other selector names a network interface, looked up through
``psutil``.
"""

from __future__ import annotations

import logging
import socket

import psutil

from bookie_address.core.errors import LookupFailure
from bookie_address.core.interfaces.dns import DefaultIPProvider, HostnameResolver
from bookie_address.core.models.config import DEFAULT_SERVICE_SELECTOR

_log = logging.getLogger(__name__)


class SystemDefaultIPProvider(DefaultIPProvider):
    """Looks up the local host's IP via ``socket`` / ``psutil``."""

    def get_default_ip(self, service_selector: str) -> str:
        if service_selector == DEFAULT_SERVICE_SELECTOR:
            return self._host_address()
        return self._interface_address(service_selector)

    def _host_address(self) -> str:
        try:
            hostname = socket.gethostname()
            infos = socket.getaddrinfo(hostname, None, proto=socket.IPPROTO_TCP)
        except OSError as exc:
            raise LookupFailure(DEFAULT_SERVICE_SELECTOR, str(exc)) from exc
        if not infos:
            raise LookupFailure(DEFAULT_SERVICE_SELECTOR, f"no address for host {hostname}")
        ip = infos[0][4][0]
        _log.debug("Host %s resolves to %s", hostname, ip)
        return ip

    def _interface_address(self, interface: str) -> str:
        try:
            addrs = psutil.net_if_addrs().get(interface)
        except OSError as exc:
            raise LookupFailure(interface, str(exc)) from exc
        if addrs is None:
            raise LookupFailure(interface, "no such network interface")

        ipv4 = [a.address for a in addrs if a.family == socket.AF_INET]
        # psutil reports link-local IPv6 addresses with a %zone suffix.
        ipv6 = [a.address.split("%", 1)[0] for a in addrs if a.family == socket.AF_INET6]
        candidates = ipv4 + ipv6
        if not candidates:
            raise LookupFailure(interface, "interface has no IP address")
        _log.debug("Interface %s addresses: %s", interface, candidates)
        return candidates[0]


class SystemHostnameResolver(HostnameResolver):
    """Reverse DNS via ``socket.gethostbyaddr``.

    The answer is returned as the resolver gave it; :class:`AddressResolver`
    decides whether it is usable as an identity.
    """

    def get_hostname(self, ip: str) -> str:
        try:
            hostname, _aliases, _addrs = socket.gethostbyaddr(ip)
        except OSError as exc:
            raise LookupFailure(ip, str(exc)) from exc
        return hostname
