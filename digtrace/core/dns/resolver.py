# core/dns/resolver.py

import asyncio

import dns.asyncquery
import dns.exception
import dns.flags
import dns.message
import dns.rcode
import dns.rdatatype

from digtrace.core.dns.config import ResolverConfig, ServerEndpoint
from digtrace.core.dns.exceptions import ResolutionError, ServerFailure
from digtrace.core.dns.system import lookup_host
from digtrace.core.logging.logger import setup_logger

logger = setup_logger(__name__)

# EOFError comes from a TCP retry the server closed mid-exchange
TRANSPORT_ERRORS = (dns.exception.DNSException, OSError, EOFError)


def normalize_domain(domain: str) -> tuple[str, str]:
    """
    Split a domain into the forms used by the two resolution steps.

    Args:
        domain: Domain name, with or without the trailing root dot

    Returns:
        Tuple of (fully-qualified name ending in ".", name for the OS resolver)

    Raises:
        ValueError: If the domain is empty
    """
    domain = domain.strip() if domain else ""
    if not domain or domain == ".":
        raise ValueError("Domain name must not be empty")

    fqdn = domain if domain.endswith(".") else domain + "."
    return fqdn, fqdn[:-1]


class FallbackResolver:
    """
    Resolves a domain through the OS resolver, then through a fixed, ordered
    list of public DNS servers queried directly for A and AAAA records.
    """

    def __init__(self, config: ResolverConfig | None = None) -> None:
        self.config = config or ResolverConfig()

    async def resolve(self, domain: str) -> list[str]:
        """
        Resolve a domain name to IP address strings.

        Args:
            domain: Domain name to resolve

        Returns:
            Non-empty list of addresses; A records come before AAAA records

        Raises:
            ValueError: If the domain is empty
            ResolutionError: If no source produced an address
        """
        fqdn, host = normalize_domain(domain)
        ips: list[str] = []
        failures: list[ServerFailure] = []
        last_error: BaseException | None = None

        try:
            async with asyncio.timeout(self.config.lifetime):
                if self.config.use_system:
                    addrs = await lookup_host(host, self.config.system_timeout)
                    if addrs:
                        logger.debug(f"System resolver answered for {host}: {addrs}")
                        return addrs

                logger.info(f"Falling back to direct DNS queries for {fqdn}")

                for server in self.config.servers:
                    try:
                        response = await self._exchange(fqdn, dns.rdatatype.A, server)
                    except TRANSPORT_ERRORS as e:
                        last_error = e
                        failures.append(ServerFailure(str(server), "A", repr(e)))
                        logger.warning(f"A query for {fqdn} via {server} failed: {e!r}")
                        continue

                    if response.rcode() != dns.rcode.NOERROR:
                        rcode = dns.rcode.to_text(response.rcode())
                        failures.append(ServerFailure(str(server), "A", rcode))
                        logger.warning(f"A query for {fqdn} via {server} returned {rcode}")
                        continue

                    ips.extend(self._addresses(response, dns.rdatatype.A))

                    try:
                        response6 = await self._exchange(
                            fqdn, dns.rdatatype.AAAA, server
                        )
                    except TRANSPORT_ERRORS as e:
                        last_error = e
                        failures.append(ServerFailure(str(server), "AAAA", repr(e)))
                        logger.warning(
                            f"AAAA query for {fqdn} via {server} failed: {e!r}"
                        )
                    else:
                        if response6.rcode() == dns.rcode.NOERROR:
                            ips.extend(self._addresses(response6, dns.rdatatype.AAAA))
                        else:
                            failures.append(
                                ServerFailure(
                                    str(server),
                                    "AAAA",
                                    dns.rcode.to_text(response6.rcode()),
                                )
                            )

                    if ips:
                        logger.debug(f"{server} answered for {fqdn}: {ips}")
                        break
        except TimeoutError as e:
            logger.warning(
                f"Resolution of {fqdn} exceeded lifetime of {self.config.lifetime}s"
            )
            last_error = e

        if not ips:
            raise ResolutionError(fqdn, last_error=last_error, failures=failures)

        return ips

    async def _exchange(
        self, fqdn: str, rdtype: dns.rdatatype.RdataType, server: ServerEndpoint
    ) -> dns.message.Message:
        query = dns.message.make_query(fqdn, rdtype)
        query.flags |= dns.flags.RD
        response, _ = await dns.asyncquery.udp_with_fallback(
            query,
            server.host,
            timeout=self.config.exchange_timeout,
            port=server.port,
        )
        return response

    @staticmethod
    def _addresses(
        response: dns.message.Message, rdtype: dns.rdatatype.RdataType
    ) -> list[str]:
        return [
            rdata.address
            for rrset in response.answer
            if rrset.rdtype == rdtype
            for rdata in rrset
        ]


dns_resolver = FallbackResolver()


async def resolve(domain: str, config: ResolverConfig | None = None) -> list[str]:
    """Resolve with the default resolver, or a fresh one built from config."""
    resolver = FallbackResolver(config) if config is not None else dns_resolver
    return await resolver.resolve(domain)
