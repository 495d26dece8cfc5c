from dataclasses import dataclass, field


@dataclass
class CLIOptions:
    single: str | None = None
    batch: str | None = None
    servers: list[str] = field(default_factory=list)
    exchange_timeout: float | None = None
    system_timeout: float | None = None
    lifetime: float | None = None
    no_system: bool = False
    json: bool = False
    verbose: bool = False
