from __future__ import annotations

import asyncio

import pytest
from thrift.Thrift import TType

from edam_client.schema import AUTH_PARAM, FieldDescriptor, MethodSchema
from edam_client.services import note_store, user_store
from edam_client.stubs import CallbackStub, build_stub

SCHEMAS = {
    "getNote": MethodSchema(
        name="getNote",
        fields={
            1: FieldDescriptor(1, AUTH_PARAM, TType.STRING),
            2: FieldDescriptor(2, "guid", TType.STRING),
        },
        throws={1: "EDAMUserException"},
    ),
}


class _FakeProtocol:
    def __init__(self, result=None, error=None):
        self.result = result
        self.error = error
        self.calls = []

    async def call(self, method, values, throws=None, *, void=False):
        self.calls.append((method, [(d.alias, v) for d, v in values], throws, void))
        if self.error is not None:
            raise self.error
        return self.result


async def _call_with_callback(stub, method: str, *args):
    done = asyncio.get_running_loop().create_future()
    getattr(stub, method)(*args, lambda err, resp: done.set_result((err, resp)))
    return await done


def test_build_stub_creates_callback_methods() -> None:
    stub_cls = build_stub("FakeStore", SCHEMAS)
    assert issubclass(stub_cls, CallbackStub)
    assert stub_cls.__name__ == "FakeStore"
    assert stub_cls.getNote.__name__ == "getNote"


@pytest.mark.asyncio
async def test_stub_reports_result_through_callback() -> None:
    protocol = _FakeProtocol(result={1: "note"})
    stub = build_stub("FakeStore", SCHEMAS)(protocol)

    err, resp = await _call_with_callback(stub, "getNote", "tok", "g-1")

    assert err is None
    assert resp == {1: "note"}
    assert protocol.calls == [
        ("getNote", [(AUTH_PARAM, "tok"), ("guid", "g-1")], {1: "EDAMUserException"}, False),
    ]
    assert not stub._pending


@pytest.mark.asyncio
async def test_stub_passes_void_flag_to_protocol() -> None:
    schemas = {"expungeThing": MethodSchema(
        name="expungeThing",
        fields={1: FieldDescriptor(1, AUTH_PARAM, TType.STRING)},
        void=True,
    )}
    protocol = _FakeProtocol()
    stub = build_stub("FakeStore", schemas)(protocol)

    assert await _call_with_callback(stub, "expungeThing", "tok") == (None, None)
    assert protocol.calls[0][3] is True


@pytest.mark.asyncio
async def test_stub_reports_error_through_callback() -> None:
    failure = RuntimeError("boom")
    stub = build_stub("FakeStore", SCHEMAS)(_FakeProtocol(error=failure))

    err, resp = await _call_with_callback(stub, "getNote", "tok", "g-1")

    assert err is failure
    assert resp is None


def test_service_stubs_expose_every_described_method() -> None:
    for module in (user_store, note_store):
        for name in module.METHODS:
            assert callable(getattr(module.Client, name))


def test_service_tables_place_token_where_declared() -> None:
    shared = note_store.METHODS["authenticateToSharedNotebook"]
    assert [f.alias for f in shared.fields.values()] == ["shareKeyOrGlobalId", AUTH_PARAM]
    assert AUTH_PARAM not in [f.alias for f in user_store.METHODS["checkVersion"].fields.values()]


def test_service_tables_mark_void_methods() -> None:
    assert user_store.METHODS["revokeLongSession"].void
    assert note_store.METHODS["untagAll"].void
    assert not user_store.METHODS["getUser"].void
    assert not note_store.METHODS["updateNotebook"].void
