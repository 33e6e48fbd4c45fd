"""Host string classification: IP literal, hostname, loopback."""

from __future__ import annotations

import ipaddress
import re
import socket

# RFC 1035 labels, 253 characters overall.
_HOSTNAME_RE = re.compile(
    r"^(?=.{1,253}\Z)(?!-)[A-Za-z0-9-]{1,63}(?<!-)(\.(?!-)[A-Za-z0-9-]{1,63}(?<!-))*\Z"
)

LOCALHOST = "localhost"


def parse_ip(host: str) -> ipaddress.IPv4Address | ipaddress.IPv6Address | None:
    """Return the parsed address for an IP literal, or ``None`` for anything else."""
    try:
        return ipaddress.ip_address(host)
    except ValueError:
        return None


def parse_legacy_ipv4(host: str) -> ipaddress.IPv4Address | None:
    """Parse the shorthand IPv4 forms ``inet_aton`` accepts (``127.1``, ``0x7f.1``, ``2130706433``)."""
    try:
        return ipaddress.IPv4Address(socket.inet_aton(host))
    except (OSError, ValueError):
        return None


def is_ip_literal(host: str) -> bool:
    return parse_ip(host) is not None


def is_valid_hostname(host: str) -> bool:
    """RFC 1035 syntax, with an all-numeric top label refused (RFC 3696 §2).

    The numeric-TLD rule keeps dotted numbers such as ``127.1`` or
    ``999.999.999.999`` from passing as names.
    """
    if not _HOSTNAME_RE.match(host):
        return False
    return not host.rsplit(".", 1)[-1].isdigit()


def is_valid_host(host: str) -> bool:
    """``True`` if *host* is an IPv4/IPv6 literal or a syntactically valid hostname."""
    return is_ip_literal(host) or is_valid_hostname(host)


def is_loopback(host: str) -> bool:
    """Classify *host* as loopback.

    IP literals are checked against the loopback range of their family
    (``127.0.0.0/8``, ``::1``); an IPv4-mapped IPv6 address is judged by the
    IPv4 address it carries, and shorthand IPv4 spellings by the address the
    system resolver would turn them into.  Names count as loopback only when
    they are ``localhost`` (any case); no name lookup is performed.
    """
    ip = parse_ip(host) or parse_legacy_ipv4(host)
    if ip is None:
        return host.lower() == LOCALHOST
    if isinstance(ip, ipaddress.IPv6Address) and ip.ipv4_mapped is not None:
        return ip.ipv4_mapped.is_loopback
    return ip.is_loopback
