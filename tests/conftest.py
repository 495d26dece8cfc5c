# tests/conftest.py

from unittest.mock import AsyncMock, patch

import dns.message
import dns.name
import dns.rcode
import dns.rdatatype
import dns.rrset
import pytest

from digtrace.core.dns.config import ResolverConfig


@pytest.fixture
def sample_domain():
    return "example.com"


@pytest.fixture
def resolver_config():
    return ResolverConfig(
        servers=("8.8.8.8:53", "114.114.114.114:53", "1.1.1.1:53"),
        exchange_timeout=5,
        system_timeout=10,
    )


@pytest.fixture
def make_response():
    """Build a real DNS response for a query, with the given answers and rcode."""

    def _make_response(query, addresses=(), rcode=dns.rcode.NOERROR, cname=None):
        response = dns.message.make_response(query)
        response.set_rcode(rcode)
        question = query.question[0]
        owner = question.name
        if cname:
            response.answer.append(
                dns.rrset.from_text(owner, 300, "IN", "CNAME", cname)
            )
            owner = dns.name.from_text(cname)
        if addresses:
            response.answer.append(
                dns.rrset.from_text(
                    owner,
                    300,
                    "IN",
                    dns.rdatatype.to_text(question.rdtype),
                    *addresses,
                )
            )
        return response

    return _make_response


@pytest.fixture
def mock_system_lookup():
    with patch(
        "digtrace.core.dns.resolver.lookup_host", new_callable=AsyncMock
    ) as mock_lookup:
        mock_lookup.return_value = []
        yield mock_lookup


@pytest.fixture
def mock_udp_query():
    with patch(
        "dns.asyncquery.udp_with_fallback",
        new_callable=AsyncMock,
    ) as mock_query:
        yield mock_query
