from __future__ import annotations

import asyncio
import functools
import logging
from typing import Any, Callable, Sequence

from .errors import ArityError
from .schema import AUTH_PARAM

logger = logging.getLogger(__name__)

AUTH_PLACEHOLDER = "AUTH_TOKEN"


def _settle(future: asyncio.Future, error: BaseException | None, response: Any) -> None:
    if future.done():
        return
    if error is not None:
        future.set_exception(error)
    else:
        future.set_result(response)


def make_proxy(fn: Callable[..., Any], name: str, params: Sequence[str | None]):
    """Wrap a callback-style stub method into a coroutine method.

    The wrapper takes the method's positional arguments without the
    authentication token, asks the owning client for the token when the
    schema declares one, and calls ``fn`` with a trailing
    ``(error, response)`` callback whose outcome becomes the awaited value.
    """
    params = tuple(params)
    requires_token = AUTH_PARAM in params
    token_pos = params.index(AUTH_PARAM) if requires_token else None
    expected = len(params) - 1 if requires_token else len(params)

    @functools.wraps(fn)
    async def proxy(self, *args):
        if len(args) != expected:
            raise ArityError(name, expected, len(args))

        supplied = iter(args)
        outgoing = [AUTH_PLACEHOLDER if param == AUTH_PARAM else next(supplied) for param in params]

        if requires_token:
            token = await self.get_auth_token()
            if token:
                outgoing[token_pos] = token
            else:
                logger.debug("no auth token available for %s", name)

        loop = asyncio.get_running_loop()
        future = loop.create_future()

        def callback(error: BaseException | None, response: Any = None) -> None:
            # may be invoked off-loop by a threaded transport, possibly after the loop closed
            if loop.is_closed():
                logger.debug("dropping late %s outcome, event loop closed", name)
                return
            loop.call_soon_threadsafe(_settle, future, error, response)

        logger.debug("calling %s", name)
        fn(self, *outgoing, callback)
        return await future

    return proxy
