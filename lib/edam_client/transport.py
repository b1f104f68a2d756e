from __future__ import annotations

from typing import Mapping

import httpx

from .errors import ApiError, AuthError, NetworkError

THRIFT_CONTENT_TYPE = "application/x-thrift"


class BinaryHttpTransport:
    """POSTs encoded Thrift messages to a single store url."""

    def __init__(self, url: str, *, timeout_s: float = 15.0, client: httpx.AsyncClient | None = None):
        self.url = url
        self._timeout_s = timeout_s
        self._headers = {
            "Content-Type": THRIFT_CONTENT_TYPE,
            "Accept": THRIFT_CONTENT_TYPE,
        }
        self._client = client
        self._owns_client = client is None

    @property
    def headers(self) -> dict[str, str]:
        return dict(self._headers)

    def add_headers(self, headers: Mapping[str, str]) -> None:
        self._headers.update(headers)

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self._timeout_s, follow_redirects=True)
        return self._client

    async def aclose(self) -> None:
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None

    async def send(self, payload: bytes) -> bytes:
        try:
            r = await self._get_client().post(self.url, content=payload, headers=self._headers)
        except httpx.RequestError as e:
            raise NetworkError(str(e)) from e

        if r.status_code >= 400:
            msg = f"POST {self.url} failed with {r.status_code}"
            details = r.text[:1000] if r.content else None
            if r.status_code in (401, 403):
                raise AuthError(r.status_code, msg, details)
            raise ApiError(r.status_code, msg, details)

        return r.content
