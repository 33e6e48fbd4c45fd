"""Address resolver — config + default-IP provider → NodeAddress.

Resolution is a single pass with no retained state:

* An explicitly advertised address is published verbatim, after a loopback
  check gated by ``allow_loopback``.
* Otherwise the default-IP provider is asked once for the local address,
  which is published as-is or reverse-resolved to a hostname.  Addresses
  that come from the local network stack are not loopback-checked.
"""

from __future__ import annotations

from pathlib import Path

from bookie_address.config.config_manager import load_config
from bookie_address.core.classify import is_ip_literal, is_loopback, is_valid_hostname
from bookie_address.core.errors import LookupFailure, UnsafeLoopbackAddress
from bookie_address.core.interfaces.dns import DefaultIPProvider, HostnameResolver
from bookie_address.core.models.address import NodeAddress
from bookie_address.core.models.config import BookieConfig, NodeAddressConfig
from bookie_address.log_config.logger import ContextualLogger, get_logger, setup_logging

_log = get_logger(__name__)


class AddressResolver:
    """Produces the advertised :class:`NodeAddress` for a bookie.

    Args:
        provider: Source of the local host's default IP.
        hostname_resolver: Reverse lookup used in hostname-identity mode.
            Defaults to :class:`SystemHostnameResolver`.
    """

    def __init__(
        self,
        provider: DefaultIPProvider,
        hostname_resolver: HostnameResolver | None = None,
    ) -> None:
        if hostname_resolver is None:
            from bookie_address.network.system_dns import SystemHostnameResolver

            hostname_resolver = SystemHostnameResolver()
        self._provider = provider
        self._hostname_resolver = hostname_resolver

    def resolve(self, config: NodeAddressConfig) -> NodeAddress:
        """Resolve the address to advertise for *config*.

        Raises:
            UnsafeLoopbackAddress: The advertised address is loopback and
                ``allow_loopback`` is off.
            LookupFailure: The provider or the reverse lookup failed.
        """
        if config.advertised_address is not None:
            log = ContextualLogger(_log, source="advertised")
            address = self._resolve_advertised(config.advertised_address, config, log)
        else:
            log = ContextualLogger(_log, source="detected", selector=config.service_selector)
            address = self._resolve_detected(config, log)
        log.info("Bookie address resolved to %s", address)
        return address

    def _resolve_advertised(
        self, host: str, config: NodeAddressConfig, log: ContextualLogger
    ) -> NodeAddress:
        if is_loopback(host) and not config.allow_loopback:
            log.warning("Rejecting loopback address %s (allow_loopback is off)", host)
            raise UnsafeLoopbackAddress(host)
        return NodeAddress(host=host, port=config.port)

    def _resolve_detected(
        self, config: NodeAddressConfig, log: ContextualLogger
    ) -> NodeAddress:
        selector = config.service_selector
        ip = self._provider.get_default_ip(selector)
        log.debug("Default IP is %s", ip)
        if not is_ip_literal(ip):
            raise LookupFailure(selector, f"provider answered {ip!r}, not an IP address")
        if not config.use_hostname_as_identity:
            return NodeAddress(host=ip, port=config.port)

        answer = self._hostname_resolver.get_hostname(ip)
        log.debug("Reverse lookup of %s gave %s", ip, answer)
        hostname = answer[:-1] if answer.endswith(".") else answer
        if is_ip_literal(hostname):
            raise LookupFailure(ip, f"reverse lookup answered with an IP address {answer!r}")
        if not is_valid_hostname(hostname):
            raise LookupFailure(ip, f"reverse lookup answered with invalid hostname {answer!r}")
        if config.use_short_hostname:
            hostname = hostname.split(".", 1)[0]
        return NodeAddress(host=hostname, port=config.port)


def get_bookie_address(
    config: NodeAddressConfig | BookieConfig,
    provider: DefaultIPProvider | None = None,
    hostname_resolver: HostnameResolver | None = None,
) -> NodeAddress:
    """Resolve *config* using the system DNS unless doubles are supplied."""
    if isinstance(config, BookieConfig):
        config = config.address
    if provider is None:
        from bookie_address.network.system_dns import SystemDefaultIPProvider

        provider = SystemDefaultIPProvider()
    return AddressResolver(provider, hostname_resolver).resolve(config)


def resolve_configured_address(
    config_path: Path | str | None = None,
    provider: DefaultIPProvider | None = None,
    hostname_resolver: HostnameResolver | None = None,
) -> NodeAddress:
    """Load ``bookie_config.json``, apply its logging settings, resolve.

    See :func:`~bookie_address.config.config_manager.load_config` for how
    *config_path* is located.
    """
    config = load_config(config_path)
    setup_logging(config.system)
    return get_bookie_address(config, provider, hostname_resolver)
