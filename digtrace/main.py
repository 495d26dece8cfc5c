import asyncio
import json
import logging
import sys
import traceback

from dotenv import load_dotenv

from digtrace.core.cli.handler import CLIHandler
from digtrace.core.dns.config import ResolverConfig
from digtrace.core.dns.exceptions import ResolutionError
from digtrace.core.dns.resolver import FallbackResolver
from digtrace.core.io.file_processor import process_file
from digtrace.core.logging.logger import setup_logger

logger = setup_logger("digtrace")


class DomainResolver:
    """
    Resolves a list of domains one after another with a shared configuration
    and collects the outcome per domain.
    """

    def __init__(self, config: ResolverConfig):
        self.resolver = FallbackResolver(config)

    async def resolve_one(self, domain: str) -> list[str] | None:
        """Returns the addresses for a domain, or None if it could not be resolved."""
        try:
            return await self.resolver.resolve(domain)
        except ResolutionError as e:
            logger.error(str(e))
            return None
        except ValueError as e:
            logger.error(f"Skipping {domain!r}: {e}")
            return None

    async def resolve_all(self, domains: list[str]) -> dict[str, list[str] | None]:
        results = {}
        for domain in domains:
            results[domain] = await self.resolve_one(domain)
        return results


def format_results(results: dict[str, list[str] | None], as_json: bool) -> str:
    if as_json:
        return json.dumps(results, indent=2)

    lines = []
    for domain, addresses in results.items():
        if addresses is None:
            continue
        lines.extend(f"{domain}\t{address}" for address in addresses)
    return "\n".join(lines)


async def start(argv: list[str] | None = None) -> int:
    """
    Main entry point for the resolver tool.
    Handles command line arguments and returns the process exit status.
    """
    load_dotenv()

    cli_options = CLIHandler.parse_args(argv)
    setup_logger("digtrace", logging.DEBUG if cli_options.verbose else logging.INFO)

    try:
        config = CLIHandler.build_config(cli_options)
    except ValueError as e:
        logger.error(f"Invalid configuration: {e}")
        return 2

    domains = (
        [cli_options.single] if cli_options.single else process_file(cli_options.batch)
    )

    if not domains:
        logger.error("No domains to process")
        return 1

    results = await DomainResolver(config).resolve_all(domains)

    output = format_results(results, cli_options.json)
    if output:
        print(output)

    failed = [domain for domain, addresses in results.items() if addresses is None]
    if failed:
        logger.warning(f"{len(failed)} of {len(results)} domains could not be resolved")
        return 1
    return 0


def main(argv: list[str] | None = None) -> None:
    status = 1
    try:
        status = asyncio.run(start(argv))
    except KeyboardInterrupt:
        logger.info("Process interrupted by user.")
    except Exception as e:
        logger.error(f"Error: {e}")
        logger.error(f"Traceback: {traceback.format_exc()}")
    sys.exit(status)


if __name__ == "__main__":
    main()
