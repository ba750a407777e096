"""
Configuration data models.

RawConfig mirrors the operator's TOML document, where every optional field is
None when absent. ResolvedConfig is the fully populated, immutable result of
merging RawConfig with host-derived defaults.
"""

from dataclasses import dataclass, field
from typing import Optional, Tuple


@dataclass(frozen=True)
class TelegramIdentity:
    """
    Credentials for the notification channel, passed through to the notifier.
    """

    token: str = field(repr=False)
    chat_id: str

    @property
    def masked_token(self) -> str:
        """The token with everything but its last four characters hidden."""
        return f"***{self.token[-4:]}" if len(self.token) > 4 else "***"


@dataclass(frozen=True)
class RawLoadAverage:
    """[load_average] section as written by the operator."""

    one: Optional[float] = None
    five: Optional[float] = None
    fifteen: Optional[float] = None


@dataclass(frozen=True)
class RawDisks:
    """[disks] section as written by the operator."""

    # Mount paths to watch, in configured order.
    disks: Optional[Tuple[str, ...]] = None
    minimum: Optional[float] = None


@dataclass(frozen=True)
class RawMemory:
    """[memory] section as written by the operator."""

    minimum: Optional[float] = None


@dataclass(frozen=True)
class RawProcessChecks:
    """[process_checks] section as written by the operator."""

    disable_web_server_check: bool = False
    disable_mysql_check: bool = False
    disable_mysql_memory_check: bool = False


@dataclass(frozen=True)
class RawConfig:
    """
    The configuration document after strict schema parsing.
    """

    telegram_token: str
    telegram_chat_id: str
    disable_self_update: bool = False
    memory: RawMemory = field(default_factory=RawMemory)
    disks: RawDisks = field(default_factory=RawDisks)
    load_average: RawLoadAverage = field(default_factory=RawLoadAverage)
    process_checks: RawProcessChecks = field(default_factory=RawProcessChecks)


@dataclass(frozen=True)
class LoadAverageLimits:
    """Ceilings for the 1, 5 and 15 minute load averages."""

    one: float
    five: float
    fifteen: float


@dataclass(frozen=True)
class ProcessCheckToggles:
    """Which process checks are enabled for this host."""

    web_server: bool = True
    database: bool = True
    database_memory: bool = True


@dataclass(frozen=True)
class ResolvedConfig:
    """
    Fully populated run-time configuration. Never mutated once built.
    """

    identity: TelegramIdentity
    load_average_max: LoadAverageLimits
    disk_min_free_ratio: float
    # Compared against observed mount points by exact string equality.
    watched_mounts: Tuple[str, ...]
    memory_min_free_ratio: float
    process_checks: ProcessCheckToggles
    self_update_enabled: bool = True
