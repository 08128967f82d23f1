"""Shared sync HTTP client with configurable timeout, and the protocol verifiers depend on."""

from typing import Any, Mapping, Protocol

import httpx


class HttpResponse(Protocol):
    status_code: int
    content: bytes


class HttpPoster(Protocol):
    """Anything that can POST a raw body. httpx.Client satisfies this as is."""

    def post(
        self, url: str, *, content: bytes, headers: Mapping[str, str]
    ) -> HttpResponse: ...


class HttpClient:
    """Thin wrapper around httpx.Client with a configurable timeout.

    Extra keyword arguments go straight to httpx.Client, so proxies, mutual
    TLS, custom CA bundles and test transports are configured the same way as
    on httpx itself. Safe to share between threads.
    """

    def __init__(self, timeout: float = 5.0, **client_options: Any) -> None:
        self._client = httpx.Client(timeout=timeout, **client_options)

    def post(self, url: str, **kwargs: Any) -> httpx.Response:
        return self._client.post(url, **kwargs)

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "HttpClient":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()
