# core/dns/config.py

import math
import os
from dataclasses import dataclass, field

from digtrace.core.network.ip_tools import is_valid_ip

DEFAULT_SERVERS = ("8.8.8.8:53", "114.114.114.114:53", "1.1.1.1:53")
DEFAULT_PORT = 53


@dataclass(frozen=True)
class ServerEndpoint:
    host: str
    port: int = DEFAULT_PORT

    @classmethod
    def parse(cls, value: str) -> "ServerEndpoint":
        """
        Parse a server endpoint written as "host", "host:port" or "[v6host]:port".

        Args:
            value: Endpoint text

        Returns:
            Parsed endpoint

        Raises:
            ValueError: If the host is not an IP literal or the port is invalid
        """
        text = value.strip()
        port = str(DEFAULT_PORT)

        if text.startswith("["):
            host, bracket, rest = text[1:].partition("]")
            if not bracket or (rest and not rest.startswith(":")):
                raise ValueError(f"Invalid DNS server endpoint: {value!r}")
            if rest:
                port = rest[1:]
        elif text.count(":") == 1:
            host, port = text.split(":")
        else:
            # bare IPv4 or unbracketed IPv6 literal
            host = text

        if not is_valid_ip(host):
            raise ValueError(f"DNS server host must be an IP address: {value!r}")
        if not port.isdigit() or not 0 < int(port) < 65536:
            raise ValueError(f"Invalid DNS server port: {value!r}")

        return cls(host=host, port=int(port))

    def __str__(self) -> str:
        if ":" in self.host:
            return f"[{self.host}]:{self.port}"
        return f"{self.host}:{self.port}"


def _positive_float(name: str, value) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ValueError(f"{name} must be a number, got {value!r}") from None
    if not math.isfinite(number):
        raise ValueError(f"{name} must be finite, got {value!r}")
    if number <= 0:
        raise ValueError(f"{name} must be positive, got {value!r}")
    return number


@dataclass(frozen=True)
class ResolverConfig:
    """
    Settings for one resolution chain.

    servers are tried in order. exchange_timeout bounds each single DNS
    exchange, system_timeout bounds the OS resolver step and lifetime,
    when set, bounds the whole chain.
    """

    servers: tuple[ServerEndpoint, ...] = field(
        default_factory=lambda: tuple(ServerEndpoint.parse(s) for s in DEFAULT_SERVERS)
    )
    exchange_timeout: float = 5.0
    system_timeout: float = 10.0
    lifetime: float | None = None
    use_system: bool = True

    def __post_init__(self):
        servers = tuple(
            s if isinstance(s, ServerEndpoint) else ServerEndpoint.parse(s)
            for s in self.servers
        )
        object.__setattr__(self, "servers", servers)
        object.__setattr__(
            self,
            "exchange_timeout",
            _positive_float("exchange_timeout", self.exchange_timeout),
        )
        object.__setattr__(
            self, "system_timeout", _positive_float("system_timeout", self.system_timeout)
        )
        if self.lifetime is not None:
            object.__setattr__(
                self, "lifetime", _positive_float("lifetime", self.lifetime)
            )

    @classmethod
    def from_env(cls, **overrides) -> "ResolverConfig":
        """
        Build a configuration from DIGTRACE_* environment variables.

        Keyword overrides that are not None take precedence over the
        environment; anything left unset keeps its default.
        """
        values = {}

        servers = os.getenv("DIGTRACE_DNS_SERVERS")
        if servers:
            values["servers"] = tuple(s for s in servers.split(",") if s.strip())

        for key, env_name in (
            ("exchange_timeout", "DIGTRACE_EXCHANGE_TIMEOUT"),
            ("system_timeout", "DIGTRACE_SYSTEM_TIMEOUT"),
            ("lifetime", "DIGTRACE_LIFETIME"),
        ):
            env_value = os.getenv(env_name)
            if env_value:
                values[key] = env_value

        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)
