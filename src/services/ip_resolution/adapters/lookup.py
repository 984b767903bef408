"""
HTTPS lookup adapter for the external address.

Performs a single GET against an ipinfo.io-style endpoint and hands the
raw body back to the cache. Failures are reported as None, never raised.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

import httpx

from src.common.telemetry.tracing import trace_span

logger = logging.getLogger(__name__)

USER_AGENT = "ip-resolution/0.1.0"


@dataclass(frozen=True)
class LookupEndpoint:
    """Where and how patiently to look up the external address."""

    host: str = "ipinfo.io"
    path: str = "/json"
    connect_timeout: float = 3.0
    send_timeout: float = 3.0
    receive_timeout: float = 5.0
    token: str | None = None

    @property
    def url(self) -> str:
        path = self.path if self.path.startswith("/") else f"/{self.path}"
        return f"https://{self.host}{path}"

    def timeout(self) -> httpx.Timeout:
        return httpx.Timeout(
            connect=self.connect_timeout,
            write=self.send_timeout,
            read=self.receive_timeout,
            pool=self.connect_timeout,
        )


class IpInfoFetcher:
    """
    Lookup collaborator for ExternalAddressCache.

    Each call issues exactly one request; retry cadence belongs to the
    cache's refresh policy.
    """

    def __init__(
        self,
        endpoint: LookupEndpoint | None = None,
        transport: httpx.BaseTransport | None = None,
    ):
        """
        Initialize the fetcher.

        Args:
            endpoint: Lookup endpoint and timeouts
            transport: Optional httpx transport (tests use httpx.MockTransport)
        """
        self._endpoint = endpoint or LookupEndpoint()
        self._transport = transport
        self._client: httpx.Client | None = None

    @property
    def endpoint(self) -> LookupEndpoint:
        return self._endpoint

    def _get_client(self) -> httpx.Client:
        """Get or create the HTTP client."""
        if self._client is None:
            headers = {"User-Agent": USER_AGENT, "Accept": "application/json"}
            if self._endpoint.token:
                headers["Authorization"] = f"Bearer {self._endpoint.token}"

            self._client = httpx.Client(
                headers=headers,
                timeout=self._endpoint.timeout(),
                transport=self._transport,
            )
        return self._client

    def close(self) -> None:
        """Close the HTTP client."""
        if self._client:
            self._client.close()
            self._client = None

    def __call__(self) -> str | None:
        """
        Fetch the raw lookup body.

        Returns:
            Body text for a 2xx response, None otherwise
        """
        url = self._endpoint.url
        with trace_span("ip.lookup.fetch", {"ip.lookup.host": self._endpoint.host}) as span:
            try:
                response = self._get_client().get(url)
                span.set_attribute("http.status_code", response.status_code)
                response.raise_for_status()
            except httpx.TimeoutException as e:
                logger.warning(f"Lookup timed out for {url}: {e!r}")
                return None
            except httpx.HTTPStatusError as e:
                logger.warning(f"Lookup returned HTTP {e.response.status_code} for {url}")
                return None
            except httpx.HTTPError as e:
                logger.warning(f"Lookup failed for {url}: {e}")
                return None

            return response.text
