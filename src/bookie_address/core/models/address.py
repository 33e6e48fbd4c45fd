"""The resolved network identity of a bookie."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from bookie_address.core.classify import is_ip_literal, is_valid_host, parse_ip


class NodeAddress(BaseModel):
    """A host (IP literal or hostname) plus an optional port."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    host: str = Field(description="IP literal or hostname")
    port: int | None = Field(default=None, ge=1, le=65535)

    @field_validator("host")
    @classmethod
    def _valid_host(cls, value: str) -> str:
        if not value:
            raise ValueError("host must not be empty")
        if not is_valid_host(value):
            raise ValueError(f"{value!r} is neither an IP address nor a valid hostname")
        return value

    @property
    def is_ip_literal(self) -> bool:
        return is_ip_literal(self.host)

    @property
    def bookie_id(self) -> str:
        """``host:port`` (IPv6 hosts bracketed), or the bare host without a port."""
        if self.port is None:
            return self.host
        ip = parse_ip(self.host)
        host = f"[{self.host}]" if ip is not None and ip.version == 6 else self.host
        return f"{host}:{self.port}"

    def __str__(self) -> str:
        return self.bookie_id
