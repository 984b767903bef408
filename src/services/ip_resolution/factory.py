"""
IP Resolution Factory

Wires the resolver, cache, lookup adapter and composer from configuration.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .adapters.interfaces import SystemAdapterSource
from .adapters.lookup import IpInfoFetcher
from .config import IpResolutionConfig
from .core.display import DisplayComposer
from .core.external import ExternalAddressCache
from .core.local import LocalAddressResolver
from .core.protocols import AdapterSource, Clock, LookupFetcher

logger = logging.getLogger(__name__)


@dataclass
class IpResolutionComponents:
    """Everything a transport needs, sharing one cache instance."""

    config: IpResolutionConfig
    adapter_source: AdapterSource
    fetcher: LookupFetcher
    local_resolver: LocalAddressResolver
    external_cache: ExternalAddressCache
    composer: DisplayComposer

    def close(self) -> None:
        """Release the lookup adapter's HTTP client, if it has one."""
        close = getattr(self.fetcher, "close", None)
        if callable(close):
            close()


def create_components(
    config: IpResolutionConfig,
    adapter_source: AdapterSource | None = None,
    fetcher: LookupFetcher | None = None,
    clock: Clock | None = None,
) -> IpResolutionComponents:
    """
    Create the IP resolution components.

    Args:
        config: Service configuration
        adapter_source: Adapter enumeration (defaults to psutil)
        fetcher: Lookup collaborator (defaults to HTTPS via httpx)
        clock: Time source for the cache (defaults to time.monotonic)

    Returns:
        Wired components
    """
    adapter_source = adapter_source or SystemAdapterSource()
    fetcher = fetcher or IpInfoFetcher(config.lookup_endpoint())

    local_resolver = LocalAddressResolver(adapter_source)
    external_cache = ExternalAddressCache(local_resolver, clock=clock)
    composer = DisplayComposer(
        local_resolver,
        external_cache,
        fetcher,
        options=config.display_options(),
        refresh_options=config.refresh_options(),
    )

    refresh = config.refresh_options()
    logger.info(
        f"IP resolution ready (strategy={refresh.strategy.value}, "
        f"min={refresh.min_refresh_interval:.0f}s, "
        f"lookup={config.lookup_host}{config.lookup_path})"
    )

    return IpResolutionComponents(
        config=config,
        adapter_source=adapter_source,
        fetcher=fetcher,
        local_resolver=local_resolver,
        external_cache=external_cache,
        composer=composer,
    )
