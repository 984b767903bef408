"""
FastAPI HTTP Transport for IP Resolution Service

Provides REST endpoints:
- /health - Liveness probe
- /api/local - Best local address
- /api/external - External address (cached)
- /api/display - Composed display strings
- /api/adapters - Adapters selectable as preferred
- /api/refresh - Force the next external lookup
- /api/display/toggle/{part} - Show or hide a display part
- /api/stats - Cache statistics

Endpoints are plain functions; FastAPI runs them in its threadpool, and the
shared cache serializes its own decisions.

NOTE: Do NOT add `from __future__ import annotations` to this file.
PEP 563 breaks FastAPI's runtime introspection for parameter sources.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any, Literal

from pydantic import BaseModel, Field

from ...config import IpResolutionConfig
from ...core.local import list_adapter_choices
from ...core.protocols import AdapterSource, Clock, LookupFetcher
from ...factory import create_components

logger = logging.getLogger(__name__)


# Response models
class LocalAddressResponse(BaseModel):
    """Response for /api/local."""

    found: bool
    address: str | None = None
    preferred_adapter: str | None = None


class ExternalAddressResponse(BaseModel):
    """Response for /api/external."""

    valid: bool
    address: str = ""
    country_code: str = ""
    organization: str = ""
    company: str = ""
    display: str = ""


class DisplayResponse(BaseModel):
    """Response for /api/display."""

    text: str
    internal: str
    external: str
    tooltip: str
    lines: list[str] = Field(default_factory=list)


class AdapterResponse(BaseModel):
    """One adapter choice."""

    friendly_name: str
    stable_name: str
    display_name: str
    is_up: bool


class ToggleResponse(BaseModel):
    """Response for display toggles."""

    part: str
    shown: bool


def create_app(
    config: IpResolutionConfig | None = None,
    adapter_source: AdapterSource | None = None,
    fetcher: LookupFetcher | None = None,
    clock: Clock | None = None,
) -> Any:
    """
    Create a FastAPI application for the IP resolution service.

    Args:
        config: Service configuration
        adapter_source: Optional adapter enumeration override
        fetcher: Optional lookup collaborator override
        clock: Optional cache clock override

    Returns:
        FastAPI application instance
    """
    from fastapi import FastAPI
    from fastapi.responses import JSONResponse

    _config = config or IpResolutionConfig()
    components = create_components(
        _config, adapter_source=adapter_source, fetcher=fetcher, clock=clock
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        """Application lifespan handler."""
        logger.info(f"Starting IP resolution service: {_config.server_name}")
        yield
        logger.info("Shutting down IP resolution service")
        components.close()

    app = FastAPI(
        title="IP Resolution Service",
        description="Resolves the best local IPv4 address and the cached external address",
        version=_config.server_version,
        lifespan=lifespan,
    )
    app.state.components = components

    @app.get("/health")
    def liveness_check() -> JSONResponse:
        """Liveness probe - just checks if process is alive."""
        return JSONResponse(content={"status": "alive"}, status_code=200)

    @app.get("/")
    def root() -> dict[str, Any]:
        """Root endpoint with service info."""
        return {
            "name": _config.server_name,
            "version": _config.server_version,
            "endpoints": {
                "health": "/health",
                "local": "/api/local",
                "external": "/api/external",
                "display": "/api/display",
                "adapters": "/api/adapters",
                "refresh": "/api/refresh",
                "toggle": "/api/display/toggle/{part}",
                "stats": "/api/stats",
            },
        }

    @app.get("/api/local", response_model=LocalAddressResponse)
    def local_address(adapter: str | None = None) -> LocalAddressResponse:
        """Best local address, optionally favouring one adapter."""
        preferred = adapter or components.composer.options.preferred_adapter or None
        address = components.local_resolver.resolve_current(preferred)
        return LocalAddressResponse(
            found=address is not None,
            address=address,
            preferred_adapter=preferred,
        )

    @app.get("/api/external", response_model=ExternalAddressResponse)
    def external_address(force: bool = False) -> ExternalAddressResponse:
        """External address, served from cache unless due or forced."""
        result = components.external_cache.resolve(
            components.composer.refresh_options, components.fetcher, force
        )
        if not result.is_valid():
            result = components.external_cache.cached_result

        return ExternalAddressResponse(
            valid=result.is_valid(),
            address=result.address,
            country_code=result.country_code,
            organization=result.organization,
            company=result.company_name(),
            display=result.display_string(),
        )

    @app.get("/api/display", response_model=DisplayResponse)
    def display(force: bool = False) -> DisplayResponse:
        """Composed display strings for one refresh tick."""
        snapshot = components.composer.compose(force_refresh=force)
        return DisplayResponse(
            text=snapshot.text,
            internal=snapshot.internal,
            external=snapshot.external,
            tooltip=snapshot.tooltip,
            lines=snapshot.lines,
        )

    @app.get("/api/adapters", response_model=list[AdapterResponse])
    def adapters() -> list[AdapterResponse]:
        """Adapters that can be chosen as preferred."""
        choices = list_adapter_choices(components.local_resolver.enumerate())
        return [AdapterResponse(**choice.to_dict()) for choice in choices]

    @app.post("/api/refresh")
    def request_refresh() -> JSONResponse:
        """Force the external lookup on the next display tick."""
        components.composer.request_refresh()
        return JSONResponse(content={"status": "scheduled"}, status_code=202)

    @app.post("/api/display/toggle/{part}", response_model=ToggleResponse)
    def toggle(part: Literal["internal", "external"]) -> ToggleResponse:
        """Show or hide the internal or external part."""
        if part == "internal":
            shown = components.composer.toggle_internal()
        else:
            shown = components.composer.toggle_external()
        logger.info(f"Display part '{part}' is now {'shown' if shown else 'hidden'}")
        return ToggleResponse(part=part, shown=shown)

    @app.get("/api/stats")
    def get_stats() -> JSONResponse:
        """Get service statistics."""
        refresh = components.composer.refresh_options
        return JSONResponse(
            content={
                "cache": components.external_cache.stats,
                "strategy": refresh.strategy.value,
                "intervals": {
                    "min": refresh.min_refresh_interval,
                    "fast": refresh.fast_refresh_interval,
                    "max": refresh.max_refresh_interval,
                    "adaptive_cycles": refresh.adaptive_cycles,
                },
            }
        )

    return app


async def run_http_server(config: IpResolutionConfig | None = None) -> None:
    """
    Run the HTTP server.

    Args:
        config: Service configuration
    """
    import uvicorn

    _config = config or IpResolutionConfig()
    app = create_app(_config)

    logger.info(f"Starting HTTP server on {_config.host}:{_config.port}")

    server_config = uvicorn.Config(
        app,
        host=_config.host,
        port=_config.port,
        log_level=_config.log_level.lower(),
    )
    server = uvicorn.Server(server_config)
    await server.serve()
