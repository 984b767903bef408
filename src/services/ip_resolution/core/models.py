"""
IP Resolution Models

Value types shared by the local resolver, the external cache and the
display layer.
"""

from __future__ import annotations

import ipaddress
from dataclasses import dataclass
from enum import Enum

from .extractor import extract_field
from .organization import format_organization

# Characters trimmed from a raw lookup body before field extraction
_BODY_WHITESPACE = " \t\r\n"


@dataclass(frozen=True)
class AddressCandidate:
    """
    One IPv4 unicast address reported by an adapter.
    """

    value: int  # 32-bit address in host order
    is_up: bool = True
    is_loopback_interface: bool = False

    @classmethod
    def from_text(
        cls,
        text: str,
        is_up: bool = True,
        is_loopback_interface: bool = False,
    ) -> AddressCandidate:
        """Build a candidate from dotted-quad text."""
        return cls(
            value=int(ipaddress.IPv4Address(text)),
            is_up=is_up,
            is_loopback_interface=is_loopback_interface,
        )

    @property
    def text(self) -> str:
        """Dotted-quad representation."""
        return str(ipaddress.IPv4Address(self.value))


@dataclass(frozen=True)
class AdapterRecord:
    """
    A network adapter as seen by one enumeration call.
    """

    friendly_name: str  # e.g. "Wi-Fi", "eth0"
    stable_name: str  # e.g. adapter GUID, or the interface name
    is_up: bool
    is_loopback: bool
    addresses: tuple[AddressCandidate, ...] = ()

    def matches(self, name: str) -> bool:
        """True if either adapter name equals ``name``."""
        return name == self.friendly_name or name == self.stable_name


@dataclass(frozen=True)
class ExternalLookupResult:
    """
    Public address plus geolocation fields parsed from one lookup response.
    """

    address: str = ""
    country_code: str = ""
    organization: str = ""  # raw AS organization, e.g. "AS15169 Google LLC"

    def is_valid(self) -> bool:
        """A result is usable only when it carries an address."""
        return bool(self.address)

    def display_string(self) -> str:
        """Format as "US 8.8.8.8", or the bare address without a country."""
        if not self.country_code:
            return self.address
        return f"{self.country_code} {self.address}"

    def company_name(self) -> str:
        """Short organization name for display."""
        if not self.organization:
            return ""
        return format_organization(self.organization)

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "address": self.address,
            "country_code": self.country_code,
            "organization": self.organization,
        }

    @classmethod
    def from_response(cls, body: str | None) -> ExternalLookupResult:
        """
        Parse a raw lookup body (ipinfo.io or httpbin.org shaped).

        Missing fields stay empty; a body without an address yields an
        invalid result.
        """
        if not body:
            return cls()

        trimmed = body.strip(_BODY_WHITESPACE)
        if not trimmed:
            return cls()

        address = extract_field(trimmed, "ip")
        if not address:
            address = extract_field(trimmed, "origin")

        return cls(
            address=address,
            country_code=extract_field(trimmed, "country"),
            organization=extract_field(trimmed, "org"),
        )


class CacheStrategy(str, Enum):
    """Policies for how long an external lookup stays fresh."""

    FIXED = "fixed"
    ADAPTIVE = "adaptive"  # shorter interval after a network change
    NETWORK_EVENT = "network_event"  # refresh on change, long periodic interval
    HYBRID = "hybrid"  # same refresh logic as ADAPTIVE


@dataclass(frozen=True)
class RefreshOptions:
    """
    Refresh policy passed on every cache call. Intervals are in seconds.
    """

    strategy: CacheStrategy = CacheStrategy.HYBRID
    min_refresh_interval: float = 300.0
    fast_refresh_interval: float = 30.0
    max_refresh_interval: float = 900.0
    adaptive_cycles: int = 6
