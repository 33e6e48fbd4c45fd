"""DNS abstraction interfaces (ABCs).

The resolver only talks to the network stack through these two classes.
:mod:`bookie_address.network.system_dns` implements them against the local
host; :mod:`bookie_address.network.static_dns` provides in-memory doubles
for tests.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class DefaultIPProvider(ABC):
    """Returns the primary IP address of the local host."""

    @abstractmethod
    def get_default_ip(self, service_selector: str) -> str:
        """Return the IP literal selected by *service_selector*.

        Raises:
            LookupFailure: If no address can be determined.
        """


class HostnameResolver(ABC):
    """Reverse-resolves an IP address to a hostname."""

    @abstractmethod
    def get_hostname(self, ip: str) -> str:
        """Return the hostname the network stack reports for *ip*.

        Raises:
            LookupFailure: If the reverse lookup fails.
        """
