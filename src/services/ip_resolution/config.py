"""
IP Resolution Service Configuration

Configuration settings using pydantic-settings for environment variable support.
"""

from __future__ import annotations

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .adapters.lookup import LookupEndpoint
from .core.display import DEFAULT_SEPARATOR, DisplayOptions, FallbackText
from .core.models import CacheStrategy, RefreshOptions

DEFAULT_REFRESH_MINUTES = 5


class IpResolutionConfig(BaseSettings):
    """
    Configuration for the IP Resolution Service.

    Reads from environment variables with IPRES_ prefix.
    """

    model_config = SettingsConfigDict(
        env_prefix="IPRES_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Server Identity
    server_name: str = Field(
        default="ip-resolution",
        description="Server name for identification",
    )
    server_version: str = Field(
        default="0.1.0",
        description="Server version",
    )

    # Transport Configuration
    transport: Literal["http", "cli"] = Field(
        default="http",
        description="Transport mode: http or cli",
    )
    host: str = Field(
        default="127.0.0.1",
        description="Host to bind for HTTP transport",
    )
    port: int = Field(
        default=8086,
        description="Port for HTTP transport",
    )

    # Display
    show_internal: bool = Field(
        default=True,
        description="Show the local (LAN) address",
    )
    show_external: bool = Field(
        default=True,
        description="Show the external (public) address",
    )
    preferred_adapter: str = Field(
        default="",
        description="Adapter friendly or stable name to prefer; empty for automatic",
    )
    separator: str = Field(
        default=DEFAULT_SEPARATOR,
        description="Separator between local and external address",
    )
    unavailable_text: str = Field(
        default="N/A",
        description="Shown when an address cannot be resolved",
    )
    disabled_text: str = Field(
        default="IP display disabled",
        description="Shown when both parts are hidden",
    )

    # Cache Configuration
    cache_strategy: CacheStrategy = Field(
        default=CacheStrategy.HYBRID,
        description="Refresh strategy: fixed, adaptive, network_event or hybrid",
    )
    smart_cache_enabled: bool = Field(
        default=True,
        description="When disabled, the fixed strategy is used regardless of cache_strategy",
    )
    refresh_minutes: int = Field(
        default=DEFAULT_REFRESH_MINUTES,
        description="Standard external refresh interval",
    )
    fast_refresh_seconds: int = Field(
        default=30,
        ge=1,
        description="Refresh interval right after a network change",
    )
    max_refresh_minutes: int = Field(
        default=15,
        ge=1,
        description="Refresh interval once the network has been stable for an hour",
    )
    adaptive_cycles: int = Field(
        default=6,
        ge=0,
        description="Number of fast refresh cycles after a network change",
    )

    # External Lookup
    lookup_host: str = Field(
        default="ipinfo.io",
        description="Lookup service host (HTTPS)",
    )
    lookup_path: str = Field(
        default="/json",
        description="Lookup request path",
    )
    lookup_token: str | None = Field(
        default=None,
        description="Optional ipinfo.io token for higher rate limits",
    )
    connect_timeout_ms: int = Field(
        default=3000,
        ge=1,
        description="Connect timeout for the lookup",
    )
    send_timeout_ms: int = Field(
        default=3000,
        ge=1,
        description="Send timeout for the lookup",
    )
    receive_timeout_ms: int = Field(
        default=5000,
        ge=1,
        description="Receive timeout for the lookup",
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level",
    )

    @field_validator("refresh_minutes")
    @classmethod
    def _default_non_positive_refresh(cls, value: int) -> int:
        return value if value > 0 else DEFAULT_REFRESH_MINUTES

    @field_validator("separator")
    @classmethod
    def _default_empty_separator(cls, value: str) -> str:
        return value or DEFAULT_SEPARATOR

    def refresh_options(self) -> RefreshOptions:
        """Build the cache refresh policy."""
        strategy = self.cache_strategy if self.smart_cache_enabled else CacheStrategy.FIXED
        return RefreshOptions(
            strategy=strategy,
            min_refresh_interval=self.refresh_minutes * 60.0,
            fast_refresh_interval=float(self.fast_refresh_seconds),
            max_refresh_interval=self.max_refresh_minutes * 60.0,
            adaptive_cycles=self.adaptive_cycles,
        )

    def display_options(self) -> DisplayOptions:
        """Build the display settings."""
        return DisplayOptions(
            show_internal=self.show_internal,
            show_external=self.show_external,
            preferred_adapter=self.preferred_adapter,
            separator=self.separator,
            fallback=FallbackText(
                unavailable=self.unavailable_text,
                disabled=self.disabled_text,
            ),
        )

    def lookup_endpoint(self) -> LookupEndpoint:
        """Build the lookup endpoint with timeouts in seconds."""
        return LookupEndpoint(
            host=self.lookup_host,
            path=self.lookup_path,
            connect_timeout=self.connect_timeout_ms / 1000.0,
            send_timeout=self.send_timeout_ms / 1000.0,
            receive_timeout=self.receive_timeout_ms / 1000.0,
            token=self.lookup_token,
        )


def load_config() -> IpResolutionConfig:
    """Load configuration from environment."""
    return IpResolutionConfig()
