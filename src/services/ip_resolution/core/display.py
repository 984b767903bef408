"""
Display Composition

Turns local and external resolution results into the strings shown to
the user: a single-line value, a two-line layout and a tooltip.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field, replace

from .external import ExternalAddressCache
from .local import LocalAddressResolver
from .models import ExternalLookupResult, RefreshOptions
from .protocols import LookupFetcher

logger = logging.getLogger(__name__)

DEFAULT_SEPARATOR = " | "


@dataclass(frozen=True)
class FallbackText:
    """Placeholder strings, in one place."""

    unavailable: str = "N/A"  # value could not be resolved
    disabled: str = "IP display disabled"  # both parts turned off
    disabled_hint: str = "Enable IP display in the options"
    internal_label: str = "Internal"
    external_label: str = "External"


@dataclass(frozen=True)
class DisplayOptions:
    """What to show and how to join it."""

    show_internal: bool = True
    show_external: bool = True
    preferred_adapter: str = ""
    separator: str = DEFAULT_SEPARATOR
    fallback: FallbackText = field(default_factory=FallbackText)


@dataclass(frozen=True)
class DisplaySnapshot:
    """Output of one refresh tick."""

    text: str
    internal: str
    external: str
    tooltip: str
    external_result: ExternalLookupResult | None = None

    @property
    def lines(self) -> list[str]:
        """Non-empty parts, top to bottom, for a two-line layout."""
        return [line for line in (self.internal, self.external) if line]

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "text": self.text,
            "internal": self.internal,
            "external": self.external,
            "tooltip": self.tooltip,
            "lines": self.lines,
            "external_result": (
                self.external_result.to_dict() if self.external_result else None
            ),
        }


class DisplayComposer:
    """
    Builds display strings on each refresh tick.

    The external cache is consulted at most once per tick. A refresh
    requested through request_refresh() forces the next tick's lookup.
    """

    def __init__(
        self,
        local_resolver: LocalAddressResolver,
        external_cache: ExternalAddressCache,
        fetch: LookupFetcher,
        options: DisplayOptions | None = None,
        refresh_options: RefreshOptions | None = None,
    ):
        self._local_resolver = local_resolver
        self._external_cache = external_cache
        self._fetch = fetch
        self._options = options or DisplayOptions()
        self._refresh_options = refresh_options or RefreshOptions()
        self._lock = threading.Lock()
        self._force_next = False

    @property
    def options(self) -> DisplayOptions:
        return self._options

    @property
    def refresh_options(self) -> RefreshOptions:
        return self._refresh_options

    def set_options(self, options: DisplayOptions) -> None:
        with self._lock:
            self._options = options

    def set_refresh_options(self, refresh_options: RefreshOptions) -> None:
        with self._lock:
            self._refresh_options = refresh_options

    def request_refresh(self) -> None:
        """Force the external lookup on the next compose() call."""
        with self._lock:
            self._force_next = True
        logger.info("External refresh requested for next tick")

    def toggle_internal(self) -> bool:
        """Flip internal display; returns the new state."""
        with self._lock:
            self._options = replace(
                self._options, show_internal=not self._options.show_internal
            )
            return self._options.show_internal

    def toggle_external(self) -> bool:
        """Flip external display; returns the new state."""
        with self._lock:
            self._options = replace(
                self._options, show_external=not self._options.show_external
            )
            return self._options.show_external

    def compose(self, force_refresh: bool = False) -> DisplaySnapshot:
        """
        Run one refresh tick.

        Args:
            force_refresh: Force the external lookup for this tick

        Returns:
            DisplaySnapshot with single-line text, parts and tooltip
        """
        with self._lock:
            options = self._options
            refresh_options = self._refresh_options
            force = force_refresh or self._force_next
            self._force_next = False

        fallback = options.fallback

        external_result: ExternalLookupResult | None = None
        if options.show_external:
            external_result = self._external_cache.resolve(
                refresh_options, self._fetch, force
            )
            # An invalid return means the fetch failed; show last known value
            if not external_result.is_valid():
                external_result = self._external_cache.cached_result

        internal = ""
        if options.show_internal:
            internal = (
                self._local_resolver.resolve_current(options.preferred_adapter or None)
                or fallback.unavailable
            )

        external = ""
        if external_result is not None:
            if external_result.is_valid():
                external = external_result.display_string()
            else:
                external = fallback.unavailable

        text = self._single_line(options, internal, external)
        tooltip = self._tooltip(options, internal, external)

        # With internal hidden, the top line carries the provider name
        top_line = internal
        if (
            not options.show_internal
            and external_result is not None
            and external_result.is_valid()
            and external_result.organization
        ):
            top_line = external_result.company_name()

        return DisplaySnapshot(
            text=text,
            internal=top_line,
            external=external,
            tooltip=tooltip,
            external_result=external_result,
        )

    @staticmethod
    def _single_line(options: DisplayOptions, internal: str, external: str) -> str:
        if options.show_internal and options.show_external:
            return internal + options.separator + external
        if options.show_internal:
            return internal
        if options.show_external:
            return external
        return options.fallback.disabled

    @staticmethod
    def _tooltip(options: DisplayOptions, internal: str, external: str) -> str:
        fallback = options.fallback
        parts = []
        if options.show_internal:
            parts.append(f"{fallback.internal_label}: {internal}")
        if options.show_external:
            parts.append(f"{fallback.external_label}: {external}")
        if not parts:
            return fallback.disabled_hint
        return "\n".join(parts)
