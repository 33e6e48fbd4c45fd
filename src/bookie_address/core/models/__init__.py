"""Pydantic models for configuration and resolved addresses."""
from bookie_address.core.models.address import NodeAddress
from bookie_address.core.models.config import (
    DEFAULT_BOOKIE_PORT,
    DEFAULT_SERVICE_SELECTOR,
    BookieConfig,
    NodeAddressConfig,
    SystemConfig,
)

__all__ = [
    "DEFAULT_BOOKIE_PORT",
    "DEFAULT_SERVICE_SELECTOR",
    "BookieConfig",
    "NodeAddress",
    "NodeAddressConfig",
    "SystemConfig",
]
