from digtrace.core.dns.config import ResolverConfig, ServerEndpoint
from digtrace.core.dns.exceptions import ResolutionError, ServerFailure
from digtrace.core.dns.resolver import (
    FallbackResolver,
    dns_resolver,
    normalize_domain,
    resolve,
)
from digtrace.core.dns.system import lookup_host

__all__ = [
    "FallbackResolver",
    "ResolutionError",
    "ResolverConfig",
    "ServerEndpoint",
    "ServerFailure",
    "dns_resolver",
    "lookup_host",
    "normalize_domain",
    "resolve",
]
