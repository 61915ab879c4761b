"""Configuration management for atm-sim."""

import os
from dataclasses import dataclass, field

from atm_sim.exceptions import ConfigurationError

LOG_FORMATS = ("standard", "json")


@dataclass
class DisplayConfig:
    """User-facing formatting configuration."""

    currency_symbol: str = "$"
    timestamp_format: str = "%m/%d/%Y %I:%M %p"


@dataclass
class BootstrapAdminConfig:
    """Administrator account created when the console client starts."""

    name: str = "Administrator"
    pin: str | None = None

    @property
    def enabled(self) -> bool:
        """Whether a bootstrap administrator should be created."""
        return self.pin is not None


@dataclass
class BankConfig:
    """Main configuration for atm-sim."""

    display: DisplayConfig = field(default_factory=DisplayConfig)
    admin: BootstrapAdminConfig = field(default_factory=BootstrapAdminConfig)
    seed: int | None = None
    log_level: str = "INFO"
    log_format: str = "standard"

    def __post_init__(self) -> None:
        if self.log_format not in LOG_FORMATS:
            raise ConfigurationError(
                f"Unknown log format {self.log_format!r}; expected one of {', '.join(LOG_FORMATS)}"
            )

    @classmethod
    def from_env(cls) -> "BankConfig":
        """Create config from environment variables."""
        display = DisplayConfig(
            currency_symbol=os.getenv("ATM_CURRENCY_SYMBOL", "$"),
        )

        admin = BootstrapAdminConfig(
            name=os.getenv("ATM_ADMIN_NAME", "Administrator"),
            pin=os.getenv("ATM_ADMIN_PIN") or None,
        )

        seed_str = os.getenv("ATM_SEED")
        try:
            seed = int(seed_str) if seed_str else None
        except ValueError as e:
            raise ConfigurationError(f"ATM_SEED must be an integer, got {seed_str!r}") from e

        return cls(
            display=display,
            admin=admin,
            seed=seed,
            log_level=os.getenv("ATM_LOG_LEVEL", "INFO"),
            log_format=os.getenv("ATM_LOG_FORMAT", "standard"),
        )
