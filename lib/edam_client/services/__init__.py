from __future__ import annotations

from thrift.Thrift import TType

from ..schema import AUTH_PARAM, FieldDescriptor, MethodSchema

EDAM_THROWS = {
    1: "EDAMUserException",
    2: "EDAMSystemException",
    3: "EDAMNotFoundException",
}

TOKEN = AUTH_PARAM
STRING, BOOL, I16, I32, BINARY, STRUCT = (
    TType.STRING,
    TType.BOOL,
    TType.I16,
    TType.I32,
    TType.STRING,
    TType.STRUCT,
)


def arg(fid: int, alias: str, ttype: int, elem_type: int | None = None) -> FieldDescriptor:
    return FieldDescriptor(fid=fid, alias=alias, ttype=ttype, elem_type=elem_type)


def method(
        name: str,
        *fields: FieldDescriptor,
        throws: dict[int, str] | None = None,
        void: bool = False,
) -> MethodSchema:
    return MethodSchema(
        name=name,
        fields={f.fid: f for f in fields},
        throws=EDAM_THROWS if throws is None else throws,
        void=void,
    )


def table(*methods: MethodSchema) -> dict[str, MethodSchema]:
    return {m.name: m for m in methods}
