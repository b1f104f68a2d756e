from __future__ import annotations

import inspect
import logging
from typing import Mapping

from .adapter import make_proxy
from .errors import SchemaError
from .schema import MethodSchema, param_names

logger = logging.getLogger(__name__)


def extend_client(base: type, schemas: Mapping[str, MethodSchema], name: str | None = None) -> type:
    """Build a subclass of ``base`` whose public methods are awaitable proxies.

    Parameter lists are computed once here and shared by every call. ``base``
    is left untouched, so extending the same stub twice gives two independent
    types instead of a doubly wrapped one.
    """
    namespace = {"__module__": base.__module__}
    for key, member in inspect.getmembers(base, inspect.isfunction):
        if key.startswith("_"):
            continue
        schema = schemas.get(key)
        if schema is None:
            raise SchemaError(f"{base.__name__}.{key} has no schema entry")
        namespace[key] = make_proxy(member, key, param_names(schema.fields))

    logger.debug("extended %s with %d proxied methods", base.__name__, len(namespace) - 1)
    return type(name or base.__name__, (base,), namespace)
