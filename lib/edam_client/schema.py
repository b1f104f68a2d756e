from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping

AUTH_PARAM = "authenticationToken"


@dataclass(frozen=True)
class FieldDescriptor:
    """One formal parameter of a generated method.

    ``fid`` is the wire field id, ``alias`` the parameter name, ``ttype``
    the Thrift wire type and ``index`` the declared ordinal position, when the
    generator emitted one.
    """

    fid: int
    alias: str
    ttype: int
    index: int | None = None
    elem_type: int | None = None


@dataclass(frozen=True)
class MethodSchema:
    name: str
    fields: Mapping[int, FieldDescriptor]
    throws: Mapping[int, str] = field(default_factory=dict)
    void: bool = False


def _place(slots: list, position: int, value) -> None:
    if position >= len(slots):
        slots.extend([None] * (position + 1 - len(slots)))
    slots[position] = value


def ordered_fields(fields: Mapping[int, FieldDescriptor]) -> list[FieldDescriptor | None]:
    # Mixed explicit/implicit positions may collide; the last write wins.
    slots: list[FieldDescriptor | None] = [None] * len(fields)
    for i, desc in enumerate(fields.values()):
        _place(slots, desc.index if desc.index is not None else i, desc)
    return slots


def param_names(fields: Mapping[int, FieldDescriptor]) -> list[str | None]:
    return [desc.alias if desc is not None else None for desc in ordered_fields(fields)]
