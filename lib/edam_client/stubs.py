from __future__ import annotations

import asyncio
import logging
from typing import Any, Callable, Mapping

from .protocol import BinaryProtocol
from .schema import MethodSchema, ordered_fields

logger = logging.getLogger(__name__)

Callback = Callable[[BaseException | None, Any], None]


class CallbackStub:
    """Base for schema-built service stubs using ``(error, response)`` callbacks."""

    schemas: Mapping[str, MethodSchema] = {}

    def __init__(self, protocol: BinaryProtocol):
        self._protocol = protocol
        self._pending: set[asyncio.Task] = set()

    def _dispatch(self, method: str, args: tuple, callback: Callback) -> None:
        schema = self.schemas[method]
        values = [(desc, value) for desc, value in zip(ordered_fields(schema.fields), args) if desc is not None]
        task = asyncio.ensure_future(self._protocol.call(method, values, schema.throws, void=schema.void))
        self._pending.add(task)

        def _done(t: asyncio.Task) -> None:
            self._pending.discard(t)
            if t.cancelled():
                callback(asyncio.CancelledError(), None)
                return
            error = t.exception()
            if error is not None:
                logger.debug("%s failed: %s", method, error)
                callback(error, None)
            else:
                callback(None, t.result())

        task.add_done_callback(_done)


def _stub_method(method: str):
    def call(self, *args):
        *params, callback = args
        self._dispatch(method, tuple(params), callback)

    call.__name__ = method
    return call


def build_stub(name: str, schemas: Mapping[str, MethodSchema]) -> type:
    namespace: dict[str, Any] = {"schemas": dict(schemas)}
    for method in schemas:
        namespace[method] = _stub_method(method)
    return type(name, (CallbackStub,), namespace)
