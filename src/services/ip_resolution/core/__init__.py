"""
Core IP resolution logic.

This module contains the domain logic for local address selection and
external address caching, independent of any transport or platform.
"""

from .display import DisplayComposer, DisplayOptions, DisplaySnapshot, FallbackText
from .external import ExternalAddressCache
from .extractor import extract_field
from .local import AdapterChoice, LocalAddressResolver, list_adapter_choices
from .models import (
    AdapterRecord,
    AddressCandidate,
    CacheStrategy,
    ExternalLookupResult,
    RefreshOptions,
)
from .organization import format_organization
from .protocols import AdapterSource, Clock, LookupFetcher
from .scorer import score_address

__all__ = [
    "AdapterChoice",
    "AdapterRecord",
    "AdapterSource",
    "AddressCandidate",
    "CacheStrategy",
    "Clock",
    "DisplayComposer",
    "DisplayOptions",
    "DisplaySnapshot",
    "ExternalAddressCache",
    "ExternalLookupResult",
    "FallbackText",
    "LocalAddressResolver",
    "LookupFetcher",
    "RefreshOptions",
    "extract_field",
    "format_organization",
    "list_adapter_choices",
    "score_address",
]
