"""Async JSON client for the self-hosted tracker API."""

from __future__ import annotations

import logging
from dataclasses import dataclass

import httpx

from .. import __version__
from ..constants import HTTP_TIMEOUT_S
from ..errors import TransportError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HttpResponse:
    """Decoded response: ``body`` is parsed JSON, raw text, or ``None`` when empty."""

    status_code: int
    body: object | None


def join_url(base_url: str, path: str) -> str:
    """Join ``path`` onto ``base_url`` with exactly one ``/`` between them.

    Absolute URLs are returned unchanged.
    """
    if path.startswith(("http://", "https://")):
        return path
    return f"{base_url.rstrip('/')}/{path.lstrip('/')}"


def _error_message(resp: httpx.Response) -> str:
    """Return the tracker's error message for a failed response."""
    try:
        data = resp.json()
    except ValueError:
        return resp.text or f"HTTP {resp.status_code}"
    if isinstance(data, dict):
        message = data.get("message") or data.get("error")
        if isinstance(message, str):
            return message
        if message:
            return str(message)
    return resp.text or f"HTTP {resp.status_code}"


class Http:
    """Thin wrapper over ``httpx.AsyncClient`` with JSON helpers.

    Successful GET responses are remembered per absolute URL.  A later
    ``get_json(..., use_cache=True)`` is served from memory; ``use_cache=False``
    always hits the network and refreshes the stored entry.  A successful PUT
    or POST evicts the entry for the URL it wrote to.
    """

    def __init__(
        self,
        name: str,
        base_url: str,
        *,
        timeout: float = HTTP_TIMEOUT_S,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.name = name
        self.base_url = base_url
        self._cache: dict[str, HttpResponse] = {}
        self._client = httpx.AsyncClient(
            headers={
                "Accept": "application/json",
                "User-Agent": f"dashboard-writer/{__version__}",
            },
            timeout=timeout,
            transport=transport,
        )

    async def __aenter__(self) -> Http:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    def clear_cache(self) -> None:
        self._cache.clear()

    async def _request(
        self,
        method: str,
        path: str,
        *,
        base_url: str | None = None,
        json: object | None = None,
    ) -> HttpResponse:
        """Perform a request and decode the JSON response.

        Raises ``TransportError`` on network failures and non-2xx responses.
        The error message is the tracker's own ``message`` when it sends one.
        """
        url = join_url(base_url or self.base_url, path)
        try:
            resp = await self._client.request(method, url, json=json)
        except httpx.HTTPError as exc:
            logger.debug("%s request %s %s failed: %s", self.name, method, url, exc)
            raise TransportError(f"{self.name} request failed: {exc}") from exc

        if not 200 <= resp.status_code < 300:
            message = _error_message(resp)
            logger.debug("%s API error %s for %s %s: %s", self.name, resp.status_code, method, url, message)
            raise TransportError(message, status_code=resp.status_code)

        if method != "GET":
            # the resource changed; drop its stale GET response
            self._cache.pop(url, None)

        if not resp.content:
            return HttpResponse(status_code=resp.status_code, body=None)
        try:
            body: object | None = resp.json()
        except ValueError:
            body = resp.text
        return HttpResponse(status_code=resp.status_code, body=body)

    async def get_json(
        self,
        path: str,
        *,
        base_url: str | None = None,
        use_cache: bool = False,
    ) -> HttpResponse:
        url = join_url(base_url or self.base_url, path)
        if use_cache and url in self._cache:
            logger.debug("%s cache hit for %s", self.name, url)
            return self._cache[url]
        result = await self._request("GET", path, base_url=base_url)
        self._cache[url] = result
        return result

    async def post_json(
        self,
        path: str,
        *,
        body: object,
        base_url: str | None = None,
    ) -> HttpResponse:
        return await self._request("POST", path, base_url=base_url, json=body)

    async def put_json(
        self,
        path: str,
        *,
        body: object,
        base_url: str | None = None,
    ) -> HttpResponse:
        return await self._request("PUT", path, base_url=base_url, json=body)
