"""Bookie advertised-address resolution."""

from bookie_address.core.address_resolver import (
    AddressResolver,
    get_bookie_address,
    resolve_configured_address,
)
from bookie_address.core.errors import (
    AddressResolutionError,
    InvalidConfiguration,
    LookupFailure,
    UnsafeLoopbackAddress,
)
from bookie_address.core.models import BookieConfig, NodeAddress, NodeAddressConfig

__version__ = "0.1.0"

__all__ = [
    "AddressResolver",
    "get_bookie_address",
    "resolve_configured_address",
    "AddressResolutionError",
    "InvalidConfiguration",
    "LookupFailure",
    "UnsafeLoopbackAddress",
    "BookieConfig",
    "NodeAddress",
    "NodeAddressConfig",
]
