# core/network/ip_tools.py

import ipaddress


def is_valid_ip(ip_string: str) -> bool:
    """
    Check if a string is a valid IP address (IPv4 or IPv6).

    Args:
        ip_string: String to check

    Returns:
        True if string is a valid IP address, False otherwise
    """
    try:
        ipaddress.ip_address(ip_string)
        return True
    except ValueError:
        return False


def unique_addresses(addresses) -> list[str]:
    """Drop repeated addresses while keeping first-seen order."""
    seen = set()
    result = []
    for address in addresses:
        if address not in seen:
            seen.add(address)
            result.append(address)
    return result
