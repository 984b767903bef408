"""Test doubles for IP resolution tests."""

from __future__ import annotations

from src.services.ip_resolution.core.models import AdapterRecord, AddressCandidate


class FakeClock:
    """Manually advanced clock."""

    def __init__(self, start: float = 1000.0):
        self.current = start

    def now(self) -> float:
        return self.current

    def advance(self, seconds: float) -> None:
        self.current += seconds


class StubAdapterSource:
    """Adapter source whose snapshot the test controls."""

    def __init__(self, adapters: list[AdapterRecord] | None = None):
        self.adapters = list(adapters or [])
        self.calls = 0

    def enumerate(self) -> list[AdapterRecord]:
        self.calls += 1
        return list(self.adapters)


class StubFetcher:
    """Lookup collaborator returning queued bodies (last one repeats)."""

    def __init__(self, *bodies: str | None):
        self.bodies = list(bodies) or [None]
        self.calls = 0

    def __call__(self) -> str | None:
        self.calls += 1
        if len(self.bodies) > 1:
            return self.bodies.pop(0)
        return self.bodies[0]


def make_adapter(
    name: str,
    *addresses: str,
    is_up: bool = True,
    is_loopback: bool = False,
    stable_name: str | None = None,
) -> AdapterRecord:
    """Build an AdapterRecord from dotted-quad strings."""
    return AdapterRecord(
        friendly_name=name,
        stable_name=stable_name if stable_name is not None else f"{{{name}-guid}}",
        is_up=is_up,
        is_loopback=is_loopback,
        addresses=tuple(
            AddressCandidate.from_text(a, is_up=is_up, is_loopback_interface=is_loopback)
            for a in addresses
        ),
    )


IPINFO_BODY = """{
  "ip": "203.0.113.7",
  "city": "Mountain View",
  "country": "US",
  "org": "AS15169 Google LLC"
}"""
