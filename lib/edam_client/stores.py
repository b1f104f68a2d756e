from __future__ import annotations

import logging

import httpx

from .config_types import ClientConfig
from .errors import ConfigurationError
from .extension import extend_client
from .headers import additional_headers
from .protocol import BinaryProtocol
from .services import note_store, user_store
from .transport import BinaryHttpTransport

logger = logging.getLogger(__name__)


class _StoreClientMixin:
    service_name = ""

    def _connect(self, url, token, timeout_s, http_client):
        if not url:
            raise ConfigurationError(
                f"{type(self).__name__} requires a {self.service_name} url when initialized"
            )
        self.config = ClientConfig(url=url, token=token or None, timeout_s=timeout_s)
        self.url = url
        self.token = self.config.token

        transport = BinaryHttpTransport(url, timeout_s=timeout_s, client=http_client)
        transport.add_headers(additional_headers(token))
        self._transport = transport
        logger.debug("%s bound to %s", type(self).__name__, url)
        return BinaryProtocol(transport)

    async def get_auth_token(self) -> str | None:
        return self.token

    async def aclose(self) -> None:
        await self._transport.aclose()

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc) -> None:
        await self.aclose()


class UserStoreClient(_StoreClientMixin, extend_client(user_store.Client, user_store.METHODS)):
    service_name = "UserStore"

    def __init__(
            self,
            url: str | None = None,
            token: str | None = None,
            *,
            timeout_s: float = 15.0,
            http_client: httpx.AsyncClient | None = None,
    ):
        super().__init__(self._connect(url, token, timeout_s, http_client))


class NoteStoreClient(_StoreClientMixin, extend_client(note_store.Client, note_store.METHODS)):
    service_name = "NoteStore"

    def __init__(
            self,
            url: str | None = None,
            token: str | None = None,
            *,
            timeout_s: float = 15.0,
            http_client: httpx.AsyncClient | None = None,
    ):
        super().__init__(self._connect(url, token, timeout_s, http_client))
