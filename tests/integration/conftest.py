"""
Shared fixtures for integration tests.

Integration tests start the real service and use the host's real adapters.
"""

import os
import socket

import pytest


@pytest.fixture(scope="session")
def free_port() -> int:
    """An unused localhost port for a service under test."""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.bind(("127.0.0.1", 0))
        return sock.getsockname()[1]


@pytest.fixture(scope="session")
def service_env() -> dict[str, str]:
    """Environment that keeps the lookup off the public internet."""
    env = {k: v for k, v in os.environ.items() if not k.startswith("IPRES_")}
    # Port 9 (discard) refuses connections, so lookups fail fast
    env["IPRES_LOOKUP_HOST"] = "127.0.0.1:9"
    env["IPRES_CONNECT_TIMEOUT_MS"] = "500"
    return env
