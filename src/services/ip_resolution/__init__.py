"""
IP Resolution Service

Resolves the best local IPv4 address and the public address (with country
and provider) behind an adaptive cache. Supports HTTP/REST and console
transports.

Usage:
    # As a service
    python -m src.services.ip_resolution --port 8086

    # Programmatic
    from src.services.ip_resolution import IpResolutionConfig, create_components
"""

__version__ = "0.1.0"

from .config import IpResolutionConfig
from .core.display import DisplayComposer, DisplayOptions, DisplaySnapshot
from .core.external import ExternalAddressCache
from .core.local import LocalAddressResolver
from .core.models import CacheStrategy, ExternalLookupResult, RefreshOptions
from .factory import IpResolutionComponents, create_components

__all__ = [
    "CacheStrategy",
    "DisplayComposer",
    "DisplayOptions",
    "DisplaySnapshot",
    "ExternalAddressCache",
    "ExternalLookupResult",
    "IpResolutionComponents",
    "IpResolutionConfig",
    "LocalAddressResolver",
    "RefreshOptions",
    "create_components",
]
