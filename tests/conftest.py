"""Shared pytest fixtures for bookie address tests."""

from __future__ import annotations

import logging

import pytest

from bookie_address.core.address_resolver import AddressResolver
from bookie_address.core.models.config import BookieConfig
from bookie_address.network.static_dns import StaticDefaultIPProvider, StaticHostnameResolver


@pytest.fixture(scope="session")
def bookie_config() -> BookieConfig:
    """Session-scoped default config (no file I/O)."""
    return BookieConfig()


@pytest.fixture
def provider() -> StaticDefaultIPProvider:
    """Provider that always reports a private, non-loopback address."""
    return StaticDefaultIPProvider("192.168.1.100")


@pytest.fixture
def hostnames() -> StaticHostnameResolver:
    return StaticHostnameResolver(
        {
            "127.0.0.1": "localhost",
            "192.168.1.100": "bookie-1.rack-a.example.com",
        }
    )


@pytest.fixture
def resolver(provider, hostnames) -> AddressResolver:
    return AddressResolver(provider, hostnames)


@pytest.fixture
def restore_root_logger():
    """Yield the root logger; undo any handlers/level changes afterwards."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    for handler in root.handlers[:]:
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    for handler in handlers:
        if handler not in root.handlers:
            root.addHandler(handler)
    root.setLevel(level)
