import argparse

from digtrace.core.cli.models import CLIOptions
from digtrace.core.dns.config import ResolverConfig
from digtrace.core.io.file_processor import sanitize_file_path
from digtrace.core.validators.sanitizer import sanitize_domain


class CLIHandler:
    """Handles CLI argument parsing and validation"""

    @staticmethod
    def build_parser() -> argparse.ArgumentParser:
        parser = argparse.ArgumentParser(
            prog="digtrace",
            description="Resolve domains via the system resolver with a direct DNS fallback",
            formatter_class=argparse.ArgumentDefaultsHelpFormatter,
        )

        input_group = parser.add_mutually_exclusive_group(required=True)
        input_group.add_argument("--single", "-d", help="Single domain to resolve")
        input_group.add_argument(
            "--batch", "-b", help="Batch mode - Path to .txt file containing domains"
        )

        parser.add_argument(
            "--server",
            "-s",
            dest="servers",
            action="append",
            default=[],
            help="Fallback DNS server as host[:port]; repeat to set the order "
            "(default from DIGTRACE_DNS_SERVERS or 8.8.8.8, 114.114.114.114, 1.1.1.1)",
        )
        parser.add_argument(
            "--exchange-timeout",
            "-t",
            type=float,
            help="Seconds allowed for each DNS exchange (default 5)",
        )
        parser.add_argument(
            "--system-timeout",
            type=float,
            help="Seconds allowed for the system resolver (default 10)",
        )
        parser.add_argument(
            "--lifetime",
            "-l",
            type=float,
            help="Overall deadline in seconds for one domain (default none)",
        )
        parser.add_argument(
            "--no-system",
            action="store_true",
            help="Skip the system resolver and query the DNS servers directly",
        )
        parser.add_argument(
            "--json", "-j", action="store_true", help="Print results as JSON"
        )
        parser.add_argument(
            "--verbose", "-v", action="store_true", help="Enable debug logging"
        )
        return parser

    @staticmethod
    def parse_args(argv: list[str] | None = None) -> CLIOptions:
        parser = CLIHandler.build_parser()
        args = parser.parse_args(argv)

        try:
            if args.single:
                args.single = sanitize_domain(args.single)
            if args.batch:
                args.batch = sanitize_file_path(args.batch)
        except ValueError as e:
            parser.error(str(e))

        return CLIOptions(**vars(args))

    @staticmethod
    def build_config(options: CLIOptions) -> ResolverConfig:
        """Merge command line options over the DIGTRACE_* environment."""
        return ResolverConfig.from_env(
            servers=tuple(options.servers) or None,
            exchange_timeout=options.exchange_timeout,
            system_timeout=options.system_timeout,
            lifetime=options.lifetime,
            use_system=False if options.no_system else None,
        )
