"""
Pytest configuration for unit tests.

Keeps unit tests hermetic: no .env overrides and no tracer provider.
"""

import os


def pytest_configure(config):
    """Clear IPRES_ settings inherited from the developer's shell."""
    for key in list(os.environ):
        if key.startswith("IPRES_"):
            del os.environ[key]
