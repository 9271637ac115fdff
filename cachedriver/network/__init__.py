"""Network module for the cache driver."""

from .address import AddressKind, classify_address, format_network_url, is_ip

__all__ = ["AddressKind", "classify_address", "format_network_url", "is_ip"]
