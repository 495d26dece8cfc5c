# tests/test_sanitizer.py

import pytest

from digtrace.core.network.ip_tools import is_valid_ip, unique_addresses
from digtrace.core.validators.sanitizer import sanitize_domain, validate_hostname


@pytest.mark.parametrize(
    "hostname,expected",
    [
        ("example.com", True),
        ("example.com.", True),
        ("sub.domain.example.co.uk", True),
        ("localhost", True),
        ("-bad.example.com", False),
        ("bad-.example.com", False),
        ("a" * 64 + ".com", False),
        ("exa mple.com", False),
        ("", False),
    ],
)
def test_validate_hostname(hostname, expected):
    assert validate_hostname(hostname) is expected


def test_sanitize_domain_strips_quotes():
    assert sanitize_domain("  'example.com.' ") == "example.com."


@pytest.mark.parametrize("domain", ["", "example.com; rm -rf /", "exa mple.com"])
def test_sanitize_domain_rejects(domain):
    with pytest.raises(ValueError):
        sanitize_domain(domain)


def test_is_valid_ip():
    assert is_valid_ip("192.0.2.1")
    assert is_valid_ip("2001:db8::1")
    assert not is_valid_ip("example.com")


def test_unique_addresses_keeps_order():
    assert unique_addresses(["b", "a", "b", "c", "a"]) == ["b", "a", "c"]
