"""SSRF protection for outbound webhook POSTs."""

import asyncio
import ipaddress
import logging
import socket
from typing import Optional
from urllib.parse import urlparse

import httpx

logger = logging.getLogger(__name__)

_BLOCKED_NETWORKS = [
    ipaddress.ip_network("10.0.0.0/8"),
    ipaddress.ip_network("172.16.0.0/12"),
    ipaddress.ip_network("192.168.0.0/16"),
    ipaddress.ip_network("127.0.0.0/8"),
    ipaddress.ip_network("169.254.0.0/16"),
    ipaddress.ip_network("0.0.0.0/8"),
    ipaddress.ip_network("::1/128"),
    ipaddress.ip_network("fc00::/7"),
    ipaddress.ip_network("fe80::/10"),
]

_BLOCKED_HOSTNAMES = {
    "localhost",
    "metadata",
    "metadata.google.internal",
}


def _is_ip_blocked(ip_str: str) -> bool:
    try:
        ip = ipaddress.ip_address(ip_str)
        return any(ip in network for network in _BLOCKED_NETWORKS)
    except ValueError:
        return True


def validate_webhook_url(url) -> Optional[str]:
    """Return None for an absolute http(s) URL, otherwise an error message."""
    if not isinstance(url, str) or not url:
        return "Missing webhook_url"
    try:
        parsed = urlparse(url)
    except ValueError:
        return "webhook_url is not a valid URL"
    if parsed.scheme not in ("http", "https"):
        return "webhook_url must use http or https protocol"
    if not parsed.hostname:
        return "webhook_url is not a valid URL"
    return None


async def blocked_reason(hostname: str) -> Optional[str]:
    """Return why *hostname* may not be contacted, or None if it is public."""
    if hostname.lower() in _BLOCKED_HOSTNAMES:
        return f"Blocked hostname: {hostname}"
    try:
        addr_infos = await asyncio.get_running_loop().getaddrinfo(
            hostname, None, family=socket.AF_UNSPEC, type=socket.SOCK_STREAM
        )
    except (socket.gaierror, UnicodeError):
        return f"Cannot resolve hostname: {hostname}"
    for _family, _, _, _, sockaddr in addr_infos:
        if _is_ip_blocked(sockaddr[0]):
            return f"DNS resolved to blocked IP for {hostname}"
    return None


class SSRFSafeTransport(httpx.AsyncHTTPTransport):
    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        hostname = request.url.host
        if hostname:
            reason = await blocked_reason(hostname)
            if reason:
                logger.warning("Refusing webhook request: %s", reason)
                raise httpx.ConnectError(reason, request=request)
        return await super().handle_async_request(request)
