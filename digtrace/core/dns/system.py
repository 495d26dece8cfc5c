# core/dns/system.py

import asyncio
import socket

from digtrace.core.logging.logger import setup_logger
from digtrace.core.network.ip_tools import unique_addresses

logger = setup_logger(__name__)


async def lookup_host(host: str, timeout: float) -> list[str]:
    """
    Resolve a hostname through the platform resolver.

    Args:
        host: Hostname without the trailing root dot
        timeout: Seconds to wait before giving up

    Returns:
        Unique addresses in platform order, or an empty list on any failure

    On timeout the executor thread running getaddrinfo is not interrupted;
    it finishes in the background and asyncio.run waits for it at shutdown.
    """
    loop = asyncio.get_running_loop()

    try:
        async with asyncio.timeout(timeout):
            infos = await loop.getaddrinfo(host, None, type=socket.SOCK_STREAM)
    except TimeoutError:
        logger.debug(f"System resolver timed out after {timeout}s for {host}")
        return []
    except (socket.gaierror, OSError, UnicodeError) as e:
        logger.debug(f"System resolver failed for {host}: {e}")
        return []

    return unique_addresses(info[4][0] for info in infos)
