"""Resolve domain names through the OS resolver with a direct-DNS fallback."""

from digtrace.core.dns import (
    FallbackResolver,
    ResolutionError,
    ResolverConfig,
    ServerEndpoint,
    resolve,
)

__all__ = [
    "FallbackResolver",
    "ResolutionError",
    "ResolverConfig",
    "ServerEndpoint",
    "resolve",
]

__version__ = "0.1.0"
