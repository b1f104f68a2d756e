from __future__ import annotations

import inspect

import pytest
from thrift.Thrift import TType

from edam_client.errors import SchemaError
from edam_client.extension import extend_client
from edam_client.schema import AUTH_PARAM, FieldDescriptor, MethodSchema


def _schema(name: str, *aliases: str) -> MethodSchema:
    return MethodSchema(
        name=name,
        fields={i + 1: FieldDescriptor(i + 1, alias, TType.STRING) for i, alias in enumerate(aliases)},
    )


class _Stub:
    service = "Fake"

    def __init__(self):
        self.seen = []

    def getUser(self, *args):
        self.seen.append(("getUser", args[:-1]))
        args[-1](None, {"id": 1})

    def getPublicUserInfo(self, *args):
        self.seen.append(("getPublicUserInfo", args[:-1]))
        args[-1](None, {"name": args[0]})

    def _helper(self):
        return "untouched"


SCHEMAS = {
    "getUser": _schema("getUser", AUTH_PARAM),
    "getPublicUserInfo": _schema("getPublicUserInfo", "username"),
}


def _client_type(base=_Stub):
    extended = extend_client(base, SCHEMAS, name="FakeClient")

    class _Client(extended):
        async def get_auth_token(self):
            return "tok"

    return extended, _Client


def test_public_methods_become_coroutines() -> None:
    extended, _ = _client_type()
    assert inspect.iscoroutinefunction(extended.getUser)
    assert inspect.iscoroutinefunction(extended.getPublicUserInfo)
    assert extended.__name__ == "FakeClient"


@pytest.mark.asyncio
async def test_calls_go_through_adapter() -> None:
    _, client_cls = _client_type()
    client = client_cls()

    assert await client.getUser() == {"id": 1}
    assert await client.getPublicUserInfo("alice") == {"name": "alice"}
    assert client.seen == [("getUser", ("tok",)), ("getPublicUserInfo", ("alice",))]


def test_non_function_and_private_members_untouched() -> None:
    extended, _ = _client_type()
    assert extended.service == "Fake"
    assert extended._helper is _Stub._helper
    assert "_helper" not in vars(extended)


def test_base_is_not_mutated() -> None:
    extend_client(_Stub, SCHEMAS)
    assert not inspect.iscoroutinefunction(_Stub.getUser)
    assert _Stub.getUser.__name__ == "getUser"


def test_extending_twice_gives_independent_types() -> None:
    first = extend_client(_Stub, SCHEMAS)
    second = extend_client(_Stub, SCHEMAS)
    assert first is not second
    assert first.getUser is not second.getUser
    assert first.__bases__ == second.__bases__ == (_Stub,)


def test_missing_schema_fails_at_build_time() -> None:
    with pytest.raises(SchemaError, match="getPublicUserInfo"):
        extend_client(_Stub, {"getUser": SCHEMAS["getUser"]})
