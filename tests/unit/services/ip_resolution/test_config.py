"""Tests for IP resolution configuration."""

from __future__ import annotations

import pytest

from src.services.ip_resolution.config import IpResolutionConfig
from src.services.ip_resolution.core.models import CacheStrategy


class TestIpResolutionConfig:
    """Test suite for IpResolutionConfig."""

    def test_default_refresh_options(self) -> None:
        options = IpResolutionConfig().refresh_options()

        assert options.strategy == CacheStrategy.HYBRID
        assert options.min_refresh_interval == 300.0
        assert options.fast_refresh_interval == 30.0
        assert options.max_refresh_interval == 900.0
        assert options.adaptive_cycles == 6

    def test_smart_cache_disabled_forces_fixed(self) -> None:
        config = IpResolutionConfig(
            cache_strategy=CacheStrategy.ADAPTIVE, smart_cache_enabled=False
        )

        assert config.refresh_options().strategy == CacheStrategy.FIXED

    @pytest.mark.parametrize("minutes", [0, -3])
    def test_non_positive_refresh_defaults_to_five_minutes(self, minutes: int) -> None:
        config = IpResolutionConfig(refresh_minutes=minutes)

        assert config.refresh_options().min_refresh_interval == 300.0

    def test_empty_separator_uses_default(self) -> None:
        assert IpResolutionConfig(separator="").display_options().separator == " | "

    def test_display_options(self) -> None:
        config = IpResolutionConfig(
            show_internal=False,
            preferred_adapter="Wi-Fi",
            unavailable_text="?",
        )

        options = config.display_options()

        assert options.show_internal is False
        assert options.show_external is True
        assert options.preferred_adapter == "Wi-Fi"
        assert options.fallback.unavailable == "?"
        assert options.fallback.disabled == "IP display disabled"

    def test_lookup_endpoint_converts_milliseconds(self) -> None:
        config = IpResolutionConfig(connect_timeout_ms=1500, receive_timeout_ms=2500)

        endpoint = config.lookup_endpoint()

        assert endpoint.url == "https://ipinfo.io/json"
        assert endpoint.connect_timeout == 1.5
        assert endpoint.send_timeout == 3.0
        assert endpoint.receive_timeout == 2.5
        assert endpoint.token is None

    def test_reads_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("IPRES_CACHE_STRATEGY", "network_event")
        monkeypatch.setenv("IPRES_PORT", "9090")
        monkeypatch.setenv("IPRES_LOOKUP_TOKEN", "abc123")

        config = IpResolutionConfig()

        assert config.cache_strategy == CacheStrategy.NETWORK_EVENT
        assert config.port == 9090
        assert config.lookup_endpoint().token == "abc123"

    def test_rejects_unknown_strategy(self) -> None:
        with pytest.raises(ValueError):
            IpResolutionConfig(cache_strategy="sometimes")
