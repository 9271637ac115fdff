"""
Connection Target Classification

Decides whether a configured host names a TCP endpoint or a unix
domain socket on the local filesystem.

    localhost, 127.0.0.1, ::1   -> NETWORK
    /var/run/redis/redis.sock   -> LOCAL_SOCKET
"""

import ipaddress
from enum import Enum, auto


class AddressKind(Enum):
    """Kind of connection target."""
    NETWORK = auto()
    LOCAL_SOCKET = auto()


def is_ip(host: str) -> bool:
    """Return True if host is a valid IPv4 or IPv6 address."""
    try:
        ipaddress.ip_address(host)
    except ValueError:
        return False
    return True


def classify_address(host: str) -> AddressKind:
    """
    Classify a configured host string.

    Only the literal "localhost" and IP addresses are treated as network
    targets. Hostnames other than localhost fall through to LOCAL_SOCKET.

    Args:
        host: Host string from the driver options

    Returns:
        AddressKind.NETWORK or AddressKind.LOCAL_SOCKET
    """
    if host == "localhost" or is_ip(host):
        return AddressKind.NETWORK
    return AddressKind.LOCAL_SOCKET


def format_network_url(host: str, port: int) -> str:
    """Compose a redis:// URL, bracketing IPv6 literals."""
    if ":" in host:
        host = f"[{host}]"
    return f"redis://{host}:{port}"
