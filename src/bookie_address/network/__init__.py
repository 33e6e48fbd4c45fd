"""DNS backends: system (socket + psutil) and static in-memory doubles."""

from bookie_address.network.static_dns import (
    FailingDefaultIPProvider,
    StaticDefaultIPProvider,
    StaticHostnameResolver,
)
from bookie_address.network.system_dns import SystemDefaultIPProvider, SystemHostnameResolver

__all__ = [
    "FailingDefaultIPProvider",
    "StaticDefaultIPProvider",
    "StaticHostnameResolver",
    "SystemDefaultIPProvider",
    "SystemHostnameResolver",
]
