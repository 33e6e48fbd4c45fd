"""Network-stack abstraction interfaces."""

from bookie_address.core.interfaces.dns import DefaultIPProvider, HostnameResolver

__all__ = ["DefaultIPProvider", "HostnameResolver"]
