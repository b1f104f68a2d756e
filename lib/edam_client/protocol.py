from __future__ import annotations

from typing import Any, Iterable, Mapping

from thrift.protocol.TBinaryProtocol import TBinaryProtocol
from thrift.Thrift import TApplicationException, TMessageType, TType
from thrift.transport.TTransport import TMemoryBuffer

from .errors import RemoteError
from .schema import FieldDescriptor
from .transport import BinaryHttpTransport

_I32_MIN, _I32_MAX = -(2 ** 31), 2 ** 31 - 1


class ThriftStruct(dict):
    """Decoded struct: ``{fid: value}`` that remembers each field's wire type."""

    def __init__(self, *args, ttypes: Mapping[int, int] | None = None, **kwargs):
        super().__init__(*args, **kwargs)
        self.ttypes = dict(ttypes or {})


class ThriftList(list):
    """Decoded list or set with its element wire type."""

    def __init__(self, items=(), elem_type: int | None = None):
        super().__init__(items)
        self.elem_type = elem_type


class ThriftMap(dict):
    def __init__(self, items=(), key_type: int | None = None, value_type: int | None = None):
        super().__init__(items)
        self.key_type = key_type
        self.value_type = value_type


def infer_ttype(value: Any) -> int:
    if isinstance(value, bool):
        return TType.BOOL
    if isinstance(value, int):
        return TType.I32 if _I32_MIN <= value <= _I32_MAX else TType.I64
    if isinstance(value, float):
        return TType.DOUBLE
    if isinstance(value, (str, bytes, bytearray)):
        return TType.STRING
    if isinstance(value, (set, frozenset)):
        return TType.SET
    if isinstance(value, (list, tuple)):
        return TType.LIST
    if isinstance(value, ThriftMap):
        return TType.MAP
    if isinstance(value, Mapping) or hasattr(value, "write"):
        return TType.STRUCT
    raise TypeError(f"cannot map {type(value).__name__} to a thrift type")


def _struct_field(fid: int, item: Any, ttypes: Mapping[int, int]) -> tuple[int, Any]:
    if fid in ttypes:
        return ttypes[fid], item
    # explicit (ttype, value) pairs
    if isinstance(item, tuple) and len(item) == 2 and isinstance(item[0], int) and not isinstance(item[0], bool):
        return item
    return infer_ttype(item), item


def write_struct(oprot, value: Any) -> None:
    """Write a generated thrift struct or a ``{fid: value}`` mapping.

    Mapping values may be plain (wire type inferred), ``(ttype, value)``
    pairs, or come from a decoded ``ThriftStruct``, which keeps the wire
    types it was read with.
    """
    if hasattr(value, "write"):
        value.write(oprot)
        return
    if not isinstance(value, Mapping):
        raise TypeError(f"cannot write {type(value).__name__} as a thrift struct")
    ttypes = getattr(value, "ttypes", {})
    oprot.writeStructBegin("struct")
    for fid in sorted(value):
        ttype, item = _struct_field(fid, value[fid], ttypes)
        if item is None:
            continue
        oprot.writeFieldBegin("", ttype, fid)
        write_value(oprot, ttype, item)
        oprot.writeFieldEnd()
    oprot.writeFieldStop()
    oprot.writeStructEnd()


def write_value(oprot, ttype: int, value: Any, elem_type: int | None = None) -> None:
    if ttype == TType.BOOL:
        oprot.writeBool(bool(value))
    elif ttype == TType.BYTE:
        oprot.writeByte(int(value))
    elif ttype == TType.I16:
        oprot.writeI16(int(value))
    elif ttype == TType.I32:
        oprot.writeI32(int(value))
    elif ttype == TType.I64:
        oprot.writeI64(int(value))
    elif ttype == TType.DOUBLE:
        oprot.writeDouble(float(value))
    elif ttype == TType.STRING:
        if isinstance(value, (bytes, bytearray)):
            oprot.writeBinary(bytes(value))
        else:
            oprot.writeString(str(value))
    elif ttype == TType.STRUCT:
        write_struct(oprot, value)
    elif ttype in (TType.LIST, TType.SET):
        items = list(value)
        if elem_type is None:
            elem_type = getattr(value, "elem_type", None)
        if elem_type is None:
            elem_type = infer_ttype(items[0]) if items else TType.STRING
        if ttype == TType.LIST:
            oprot.writeListBegin(elem_type, len(items))
        else:
            oprot.writeSetBegin(elem_type, len(items))
        for item in items:
            write_value(oprot, elem_type, item)
        if ttype == TType.LIST:
            oprot.writeListEnd()
        else:
            oprot.writeSetEnd()
    elif ttype == TType.MAP:
        items = list(value.items())
        ktype = getattr(value, "key_type", None)
        vtype = getattr(value, "value_type", None)
        if ktype is None:
            ktype = infer_ttype(items[0][0]) if items else TType.STRING
        if vtype is None:
            vtype = infer_ttype(items[0][1]) if items else TType.STRING
        oprot.writeMapBegin(ktype, vtype, len(items))
        for k, v in items:
            write_value(oprot, ktype, k)
            write_value(oprot, vtype, v)
        oprot.writeMapEnd()
    else:
        raise TypeError(f"unsupported thrift type {ttype}")


def read_struct(iprot) -> ThriftStruct:
    iprot.readStructBegin()
    result = ThriftStruct()
    while True:
        _, ftype, fid = iprot.readFieldBegin()
        if ftype == TType.STOP:
            break
        result[fid] = read_value(iprot, ftype)
        result.ttypes[fid] = ftype
        iprot.readFieldEnd()
    iprot.readStructEnd()
    return result


def read_value(iprot, ttype: int) -> Any:
    if ttype == TType.BOOL:
        return iprot.readBool()
    if ttype == TType.BYTE:
        return iprot.readByte()
    if ttype == TType.I16:
        return iprot.readI16()
    if ttype == TType.I32:
        return iprot.readI32()
    if ttype == TType.I64:
        return iprot.readI64()
    if ttype == TType.DOUBLE:
        return iprot.readDouble()
    if ttype == TType.STRING:
        raw = iprot.readBinary()
        try:
            return raw.decode("utf-8")
        except UnicodeDecodeError:
            return raw
    if ttype == TType.STRUCT:
        return read_struct(iprot)
    if ttype == TType.MAP:
        ktype, vtype, size = iprot.readMapBegin()
        data = ThriftMap(key_type=ktype, value_type=vtype)
        for _ in range(size):
            k = read_value(iprot, ktype)
            data[k] = read_value(iprot, vtype)
        iprot.readMapEnd()
        return data
    if ttype == TType.LIST:
        etype, size = iprot.readListBegin()
        items = ThriftList((read_value(iprot, etype) for _ in range(size)), elem_type=etype)
        iprot.readListEnd()
        return items
    if ttype == TType.SET:
        etype, size = iprot.readSetBegin()
        items = ThriftList((read_value(iprot, etype) for _ in range(size)), elem_type=etype)
        iprot.readSetEnd()
        return items
    iprot.skip(ttype)
    return None


class BinaryProtocol:
    """Thrift binary framing of one request/reply exchange per call.

    Replies are decoded without generated result types: structs come back as
    ``ThriftStruct`` dicts keyed by field id, which can be sent back unchanged.
    """

    def __init__(self, transport: BinaryHttpTransport):
        self.transport = transport
        self._seqid = 0

    def encode_call(self, method: str, values: Iterable[tuple[FieldDescriptor, Any]]) -> bytes:
        self._seqid += 1
        buf = TMemoryBuffer()
        oprot = TBinaryProtocol(buf)
        oprot.writeMessageBegin(method, TMessageType.CALL, self._seqid)
        oprot.writeStructBegin(f"{method}_args")
        for desc, value in values:
            if value is None:
                continue
            oprot.writeFieldBegin(desc.alias, desc.ttype, desc.fid)
            write_value(oprot, desc.ttype, value, desc.elem_type)
            oprot.writeFieldEnd()
        oprot.writeFieldStop()
        oprot.writeStructEnd()
        oprot.writeMessageEnd()
        return buf.getvalue()

    def decode_reply(
            self,
            method: str,
            payload: bytes,
            throws: Mapping[int, str] | None = None,
            *,
            seqid: int | None = None,
            void: bool = False,
    ) -> Any:
        iprot = TBinaryProtocol(TMemoryBuffer(payload))
        _, mtype, rseqid = iprot.readMessageBegin()
        if mtype == TMessageType.EXCEPTION:
            x = TApplicationException()
            x.read(iprot)
            iprot.readMessageEnd()
            raise x
        if mtype != TMessageType.REPLY:
            raise TApplicationException(
                TApplicationException.INVALID_MESSAGE_TYPE, f"{method} got message type {mtype}"
            )
        if seqid is not None and rseqid != seqid:
            raise TApplicationException(
                TApplicationException.BAD_SEQUENCE_ID, f"{method} expected seqid {seqid}, got {rseqid}"
            )
        result = read_struct(iprot)
        iprot.readMessageEnd()

        for fid, value in result.items():
            if fid != 0:
                raise RemoteError(method, (throws or {}).get(fid, f"field {fid}"), value)
        if 0 in result:
            return result[0]
        if not void:
            raise TApplicationException(
                TApplicationException.MISSING_RESULT, f"{method} failed: unknown result"
            )
        return None

    async def call(
            self,
            method: str,
            values: Iterable[tuple[FieldDescriptor, Any]],
            throws: Mapping[int, str] | None = None,
            *,
            void: bool = False,
    ) -> Any:
        request = self.encode_call(method, values)
        seqid = self._seqid
        payload = await self.transport.send(request)
        return self.decode_reply(method, payload, throws, seqid=seqid, void=void)
