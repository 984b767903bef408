"""
External Address Cache

Decides, per call, whether the public-address lookup must be refreshed or
can be served from memory. The decision runs under a lock; the network
fetch does not, so a slow lookup never blocks readers of a still-fresh
value.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from typing import Any

from src.common.telemetry.tracing import trace_span

from .clock import MonotonicClock
from .local import LocalAddressResolver
from .models import CacheStrategy, ExternalLookupResult, RefreshOptions
from .protocols import Clock, LookupFetcher

logger = logging.getLogger(__name__)

# Network unchanged for longer than this counts as stable
STABLE_AFTER_SECONDS = 3600.0


@dataclass
class CacheState:
    """Mutable cache state, guarded by ExternalAddressCache's lock."""

    cached_result: ExternalLookupResult = field(default_factory=ExternalLookupResult)
    last_fetch_time: float | None = None
    last_change_time: float = 0.0
    fast_mode_remaining: int = 0
    last_local_snapshot: str = ""


@dataclass
class CacheStats:
    """Counters for monitoring."""

    cache_hits: int = 0
    fetches: int = 0
    fetch_failures: int = 0
    network_changes: int = 0


class ExternalAddressCache:
    """
    Adaptive cache for the external address lookup.

    Strategies:
    - FIXED: refresh every min_refresh_interval
    - ADAPTIVE / HYBRID: fast_refresh_interval for adaptive_cycles calls after
      a network change, then min_refresh_interval, relaxing to
      max_refresh_interval once the network has been stable for an hour
    - NETWORK_EVENT: refresh on network change, otherwise every
      max_refresh_interval

    A change of the best local address is treated as a network change and
    forces an immediate refetch. Failed lookups never clear the cache.

    Not single-flight: concurrent callers that all miss may all fetch.
    """

    def __init__(
        self,
        local_resolver: LocalAddressResolver,
        clock: Clock | None = None,
    ):
        """
        Initialize the cache.

        Args:
            local_resolver: Resolver used for network change detection
            clock: Time source (defaults to time.monotonic)
        """
        self._local_resolver = local_resolver
        self._clock = clock or MonotonicClock()
        self._lock = threading.Lock()
        self._state = CacheState(last_change_time=self._clock.now())
        self._stats = CacheStats()

    def resolve(
        self,
        options: RefreshOptions,
        fetch: LookupFetcher,
        force_refresh: bool = False,
    ) -> ExternalLookupResult:
        """
        Return the external lookup result, fetching only when due.

        Args:
            options: Refresh policy
            fetch: Lookup collaborator, called without holding the lock
            force_refresh: Skip the freshness check

        Returns:
            The cached result on a hit, otherwise the freshly fetched result.
            An invalid result means the fetch failed; the cache still holds
            the last good value.
        """
        with trace_span(
            "ip.cache.resolve",
            {"ip.strategy": options.strategy.value, "ip.force": force_refresh},
        ) as span:
            with self._lock:
                now = self._clock.now()
                network_changed = self._detect_change(now, options)

                if not (force_refresh or network_changed):
                    cached = self._serve_cached(now, options)
                    if cached is not None:
                        self._stats.cache_hits += 1
                        span.set_attribute("ip.cache_hit", True)
                        return cached

                self._stats.fetches += 1

            span.set_attribute("ip.cache_hit", False)
            result = self._fetch(fetch)

            if result.is_valid():
                with self._lock:
                    self._state.cached_result = result
                    self._state.last_fetch_time = now
                logger.info(f"External address refreshed: {result.display_string()}")
            else:
                with self._lock:
                    self._stats.fetch_failures += 1
                logger.warning("External address lookup failed, keeping cached value")

            span.set_attribute("ip.valid", result.is_valid())
            return result

    def resolve_address(
        self,
        options: RefreshOptions,
        fetch: LookupFetcher,
        force_refresh: bool = False,
    ) -> str:
        """Resolve and return only the address ("" on failure)."""
        return self.resolve(options, fetch, force_refresh).address

    @property
    def cached_result(self) -> ExternalLookupResult:
        """Last known-good result (invalid if nothing was fetched yet)."""
        with self._lock:
            return self._state.cached_result

    @property
    def stats(self) -> dict[str, Any]:
        """Get cache statistics."""
        with self._lock:
            state = self._state
            return {
                "cache_hits": self._stats.cache_hits,
                "fetches": self._stats.fetches,
                "fetch_failures": self._stats.fetch_failures,
                "network_changes": self._stats.network_changes,
                "fast_mode_remaining": state.fast_mode_remaining,
                "has_result": state.cached_result.is_valid(),
                "last_fetch_age_seconds": (
                    None
                    if state.last_fetch_time is None
                    else self._clock.now() - state.last_fetch_time
                ),
                "local_snapshot": state.last_local_snapshot,
            }

    def reset(self) -> None:
        """Forget all cached state."""
        with self._lock:
            self._state = CacheState(last_change_time=self._clock.now())
            self._stats = CacheStats()
        logger.info("External address cache reset")

    def _detect_change(self, now: float, options: RefreshOptions) -> bool:
        snapshot = self._local_resolver.resolve_current() or ""
        state = self._state

        changed = bool(state.last_local_snapshot) and snapshot != state.last_local_snapshot
        if changed:
            logger.info(
                f"Local address changed from {state.last_local_snapshot} to "
                f"{snapshot or 'none'}, entering fast refresh mode"
            )
            state.last_change_time = now
            state.fast_mode_remaining = options.adaptive_cycles
            self._stats.network_changes += 1

        state.last_local_snapshot = snapshot
        return changed

    def _serve_cached(
        self, now: float, options: RefreshOptions
    ) -> ExternalLookupResult | None:
        state = self._state
        if not state.cached_result.is_valid() or state.last_fetch_time is None:
            return None

        interval = self._refresh_interval(now, options)
        if now - state.last_fetch_time < interval:
            return state.cached_result
        return None

    def _refresh_interval(self, now: float, options: RefreshOptions) -> float:
        state = self._state
        strategy = options.strategy

        if strategy == CacheStrategy.FIXED:
            return options.min_refresh_interval

        if strategy == CacheStrategy.NETWORK_EVENT:
            return options.max_refresh_interval

        # ADAPTIVE and HYBRID
        if state.fast_mode_remaining > 0:
            state.fast_mode_remaining -= 1
            return options.fast_refresh_interval
        if now - state.last_change_time > STABLE_AFTER_SECONDS:
            return options.max_refresh_interval
        return options.min_refresh_interval

    def _fetch(self, fetch: LookupFetcher) -> ExternalLookupResult:
        try:
            body = fetch()
        except Exception as e:
            logger.warning(f"Lookup collaborator raised: {e}")
            return ExternalLookupResult()
        return ExternalLookupResult.from_response(body)
