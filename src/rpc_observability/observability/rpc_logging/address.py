"""RPC logging – transport peer address to structured :class:`Address`.

Accepted peer representations:

* ``None`` → the default ``Address()``
* socket tuples ``(host, port)`` and ``(host, port, flowinfo, scope_id)``
* :mod:`ipaddress` address objects (no port)
* gRPC peer strings: ``ipv4:10.0.0.1:443``, ``ipv6:[::1]:443`` (brackets may be
  percent-encoded) and ``unix:/run/app.sock``

Anything else maps to ``AddressType.UNKNOWN`` carrying ``str(peer)``.
IPv6 text is always the RFC 5952 canonical form.
"""
from __future__ import annotations

import ipaddress
from typing import Any
from urllib.parse import unquote

from rpc_observability.observability.rpc_logging.record import Address, AddressType

_IPAddress = ipaddress.IPv4Address | ipaddress.IPv6Address


def _ip_to_structured(ip: _IPAddress, port: int | None) -> Address:
    if isinstance(ip, ipaddress.IPv6Address) and ip.ipv4_mapped is not None:
        ip = ip.ipv4_mapped
    if isinstance(ip, ipaddress.IPv4Address):
        return Address(type=AddressType.IPV4, address=str(ip), ip_port=port)
    # .compressed is RFC 5952: lower-case, longest zero run as "::", no leading zeros
    return Address(type=AddressType.IPV6, address=ip.compressed, ip_port=port)


def _parse_ip(host: str) -> _IPAddress | None:
    try:
        return ipaddress.ip_address(host)
    except ValueError:
        return None


def _from_socket_tuple(peer: tuple[Any, ...]) -> Address | None:
    if len(peer) not in (2, 4) or not isinstance(peer[0], str) or not isinstance(peer[1], int):
        return None
    host = peer[0]
    if len(peer) == 4 and peer[3]:
        host = f"{host}%{peer[3]}"
    ip = _parse_ip(host)
    if ip is None:
        return None
    return _ip_to_structured(ip, peer[1])


def _from_peer_string(peer: str) -> Address | None:
    scheme, sep, rest = peer.partition(":")
    if not sep:
        return None
    if scheme == "unix":
        return Address(type=AddressType.UNIX, address=rest)
    if scheme not in ("ipv4", "ipv6"):
        return None

    host, _, port_text = unquote(rest).rpartition(":")
    if not port_text.isdigit():
        return None
    if scheme == "ipv6":
        if not (host.startswith("[") and host.endswith("]")):
            return None
        host = host[1:-1]
    ip = _parse_ip(host)
    if ip is None:
        return None
    return _ip_to_structured(ip, int(port_text))


def address_to_structured(peer: Any) -> Address:
    """Convert a transport peer address into a structured :class:`Address`.

    Total over its input: unrecognised values become ``TYPE_UNKNOWN``.
    """
    if peer is None:
        return Address()

    converted: Address | None = None
    if isinstance(peer, Address):
        converted = peer
    elif isinstance(peer, (ipaddress.IPv4Address, ipaddress.IPv6Address)):
        converted = _ip_to_structured(peer, None)
    elif isinstance(peer, tuple):
        converted = _from_socket_tuple(peer)
    elif isinstance(peer, str):
        converted = _from_peer_string(peer)

    if converted is None:
        converted = Address(type=AddressType.UNKNOWN, address=str(peer))
    return converted


__all__ = ["address_to_structured"]
