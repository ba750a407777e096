"""
Network address discovery.
"""

import ipaddress
import logging
import socket
from typing import Optional

import psutil

logger = logging.getLogger(__name__)


def primary_global_ipv4() -> Optional[str]:
    """Return the first globally routable IPv4 address on any interface.

    Interfaces are scanned in the order psutil reports them. Private,
    loopback and link-local addresses are skipped.

    Returns:
        The address as a dotted-quad string, or None if the host has no
        global IPv4 address or the interfaces cannot be listed.
    """
    try:
        interfaces = psutil.net_if_addrs()
    except OSError as e:
        logger.warning(f"Failed to list network interfaces: {type(e).__name__}: {e}")
        return None

    for name, addresses in interfaces.items():
        for addr in addresses:
            if addr.family != socket.AF_INET:
                continue
            try:
                ip = ipaddress.IPv4Address(addr.address)
            except ValueError:
                continue
            if ip.is_global:
                logger.debug(f"Primary address {ip} found on interface {name}")
                return str(ip)
    return None
