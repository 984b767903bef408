"""
Platform and network adapters for IP resolution.
"""

from .interfaces import SystemAdapterSource
from .lookup import IpInfoFetcher, LookupEndpoint

__all__ = ["IpInfoFetcher", "LookupEndpoint", "SystemAdapterSource"]
