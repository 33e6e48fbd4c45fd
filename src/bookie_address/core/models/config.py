"""Configuration Pydantic models: BookieConfig, NodeAddressConfig, SystemConfig."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from bookie_address.core.classify import is_valid_host

DEFAULT_SERVICE_SELECTOR = "default"
DEFAULT_BOOKIE_PORT = 3181

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class NodeAddressConfig(BaseModel):
    """Settings that decide which address a bookie advertises.

    ``advertised_address`` wins over everything else.  When it is unset the
    address is auto-detected through ``service_selector`` and published as
    an IP, or as a hostname when ``use_hostname_as_identity`` is on.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    advertised_address: str | None = Field(
        default=None,
        description="Explicit host to advertise; blank means auto-detect",
    )
    allow_loopback: bool = Field(
        default=False,
        description="Accept a loopback address as the advertised address",
    )
    use_hostname_as_identity: bool = Field(
        default=False,
        description="Auto-detect: publish the reverse-resolved hostname instead of the IP",
    )
    use_short_hostname: bool = Field(
        default=False,
        description="Strip the domain part from the published hostname",
    )
    service_selector: str = Field(
        default=DEFAULT_SERVICE_SELECTOR,
        min_length=1,
        description="Interface name passed to the default-IP provider ('default' = host address)",
    )
    port: int | None = Field(
        default=None,
        ge=1,
        le=65535,
        description="Bookie port carried into the resolved address",
    )

    @field_validator("advertised_address", mode="before")
    @classmethod
    def _blank_means_auto(cls, value: object) -> object:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("advertised_address")
    @classmethod
    def _must_be_host(cls, value: str | None) -> str | None:
        if value is not None and not is_valid_host(value):
            raise ValueError(f"{value!r} is neither an IP address nor a valid hostname")
        return value


class SystemConfig(BaseModel):
    """Non-address runtime settings."""

    model_config = ConfigDict(extra="forbid")

    log_level: str = Field(default="INFO", description="Root log level")
    log_dir: str | None = Field(
        default="logs", description="Directory for bookie.log; null logs to the console only"
    )

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}")
        return level


class BookieConfig(BaseModel):
    """Top-level configuration loaded from ``bookie_config.json``."""

    model_config = ConfigDict(extra="forbid")

    address: NodeAddressConfig = Field(default_factory=NodeAddressConfig)
    system: SystemConfig = Field(default_factory=SystemConfig)
