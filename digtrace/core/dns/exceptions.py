# core/dns/exceptions.py

from dataclasses import dataclass


@dataclass(frozen=True)
class ServerFailure:
    """A single failed exchange with a fallback server."""

    server: str
    record_type: str
    reason: str


class ResolutionError(Exception):
    """
    Raised when neither the OS resolver nor any fallback server produced an
    address.

    Attributes:
        domain: The domain that could not be resolved
        last_error: Last transport-level exception seen, or None when every
            server answered with a non-success rcode
        failures: Every per-server failure in the order it happened
    """

    def __init__(
        self,
        domain: str,
        last_error: BaseException | None = None,
        failures: list[ServerFailure] | None = None,
    ):
        self.domain = domain
        self.last_error = last_error
        self.failures = list(failures or [])

        message = f"Failed to resolve {domain}"
        if self.failures:
            details = "; ".join(
                f"{f.server} {f.record_type}: {f.reason}" for f in self.failures
            )
            message = f"{message} ({details})"
        elif last_error is not None:
            message = f"{message}: {last_error}"
        super().__init__(message)
