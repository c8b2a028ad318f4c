"""SSRF host check."""

import ipaddress

_LOCAL_NAMES = {"localhost"}

_PRIVATE_NETWORKS = [
    ipaddress.ip_network("10.0.0.0/8"),
    ipaddress.ip_network("172.16.0.0/12"),
    ipaddress.ip_network("192.168.0.0/16"),
]


def _strip_host(host: str) -> str:
    """Drop userinfo, brackets and port from a URL authority."""
    host = host.rsplit("@", 1)[-1].lower()
    if host.startswith("["):
        # [::1]:8080
        return host[1:].split("]", 1)[0]
    if host.count(":") == 1:
        return host.split(":", 1)[0]
    return host


def is_local_network(host: str | None) -> bool:
    """Return True for loopback and private network hosts.

    Covers localhost, 127.0.0.0/8, ::1, 10.0.0.0/8, 172.16.0.0/12 and
    192.168.0.0/16. Host names other than localhost are not resolved.
    """
    if not host:
        return False

    name = _strip_host(host)
    if name in _LOCAL_NAMES:
        return True

    try:
        address = ipaddress.ip_address(name)
    except ValueError:
        return False

    if address.is_loopback:
        return True
    return any(address in network for network in _PRIVATE_NETWORKS)
