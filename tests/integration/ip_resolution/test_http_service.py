"""
End-to-end integration tests for the IP resolution HTTP service.

These tests start the actual HTTP service as a subprocess and exercise it
over the wire. The external lookup points at a closed local port, so no
traffic leaves the host.

Run with: pytest tests/integration/ip_resolution/ -v
"""

from __future__ import annotations

import ipaddress
import subprocess
import sys
import time

import httpx
import pytest

pytestmark = pytest.mark.integration


@pytest.fixture(scope="module")
def ip_service(free_port: int, service_env: dict[str, str]):
    """Start the IP resolution service for testing."""
    process = subprocess.Popen(
        [
            sys.executable,
            "-m",
            "src.services.ip_resolution",
            "--port",
            str(free_port),
            "--log-level",
            "warning",
        ],
        env=service_env,
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
    )

    base_url = f"http://127.0.0.1:{free_port}"
    for _ in range(30):
        try:
            response = httpx.get(f"{base_url}/health", timeout=1.0)
            if response.status_code == 200:
                break
        except httpx.ConnectError:
            pass
        time.sleep(0.5)
    else:
        process.kill()
        pytest.fail("IP resolution service failed to start")

    yield base_url

    process.terminate()
    try:
        process.wait(timeout=5)
    except subprocess.TimeoutExpired:
        process.kill()


class TestIpResolutionService:
    """End-to-end tests for the IP resolution service."""

    def test_health_check(self, ip_service: str) -> None:
        response = httpx.get(f"{ip_service}/health")

        assert response.json() == {"status": "alive"}

    def test_local_address_is_private_or_absent(self, ip_service: str) -> None:
        """Whatever the host has, loopback is never reported."""
        data = httpx.get(f"{ip_service}/api/local").json()

        if data["found"]:
            address = ipaddress.IPv4Address(data["address"])
            assert str(address) not in ("127.0.0.1", "0.0.0.0")
        else:
            assert data["address"] is None

    def test_adapters_exclude_loopback(self, ip_service: str) -> None:
        adapters = httpx.get(f"{ip_service}/api/adapters").json()

        assert all(a["display_name"].endswith(("(connected)", "(disconnected)")) for a in adapters)
        assert "lo (connected)" not in [a["display_name"] for a in adapters]

    def test_failed_lookup_reported_as_invalid(self, ip_service: str) -> None:
        data = httpx.get(f"{ip_service}/api/external", timeout=10.0).json()

        assert data["valid"] is False

    def test_display_falls_back_when_lookup_fails(self, ip_service: str) -> None:
        data = httpx.get(f"{ip_service}/api/display", timeout=10.0).json()

        assert data["external"] == "N/A"
        assert data["tooltip"].endswith("External: N/A")

    def test_stats_count_failures(self, ip_service: str) -> None:
        httpx.get(f"{ip_service}/api/external", params={"force": True}, timeout=10.0)

        stats = httpx.get(f"{ip_service}/api/stats").json()

        assert stats["strategy"] == "hybrid"
        assert stats["cache"]["fetch_failures"] >= 1
