# core/validators/sanitizer.py

import re

from digtrace.core.logging.logger import setup_logger

logger = setup_logger(__name__)


def validate_hostname(hostname: str) -> bool:
    """
    Validate that a string is a valid hostname according to DNS rules.

    Args:
        hostname: Hostname to validate, with or without the trailing root dot

    Returns:
        True if valid hostname, False otherwise
    """
    if not hostname or len(hostname) > 255:
        return False

    if hostname[-1] == ".":
        hostname = hostname[:-1]

    pattern = r"^(?!-)[A-Za-z0-9_-]+(?<!-)(?:\.(?!-)[A-Za-z0-9_-]+(?<!-))*$"

    return bool(
        re.match(pattern, hostname)
        and all(len(part) <= 63 for part in hostname.split("."))
    )


def sanitize_domain(domain: str) -> str:
    """
    Sanitize a domain name before it is handed to a resolver.

    Args:
        domain: Domain name to sanitize

    Returns:
        Sanitized domain name

    Raises:
        ValueError: If domain is empty or contains invalid characters
    """
    domain = domain.strip().strip("'\"")
    if not re.match(r"^[a-zA-Z0-9.\-_]+$", domain):
        raise ValueError(f"Invalid domain format: {domain!r}")
    return domain
