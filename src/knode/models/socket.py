from __future__ import annotations
from enum import IntEnum
from pydantic import BaseModel, ConfigDict, Field, computed_field, model_validator
from .common import Connection, BuiltinValueType, resolve_value_type


class SocketKind(IntEnum):
    OUTGOING_NAMED = 0
    INCOMING_NAMED = 1
    INCOMING_NUMBER = 2
    INCOMING_SELECT = 3
    INCOMING_SWITCH = 4
    INCOMING_TEXT = 5
    # Kind field is 3 bits wide; 6 and 7 have no defined meaning but still
    # decode like any other incoming kind.
    RESERVED_6 = 6
    RESERVED_7 = 7


class Socket(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: SocketKind
    value_type: int = Field(..., ge=0, le=0xFF)
    port_slot: int = Field(..., ge=0, le=0xFF)
    repetitive: bool = False
    connection: Connection | None = None
    value: str | None = None

    @model_validator(mode="after")
    def _connection_xor_value(self) -> "Socket":
        if self.connection is not None and self.value is not None:
            raise ValueError("a socket cannot be both connected and carry a value")
        if self.kind is SocketKind.OUTGOING_NAMED and (self.connection is not None or self.value is not None):
            raise ValueError("outgoing sockets carry neither a connection nor a value")
        return self

    @property
    def connected(self) -> bool:
        return self.connection is not None

    @computed_field  # type: ignore[prop-decorator]
    @property
    def builtin_value_type(self) -> str | None:
        t = resolve_value_type(self.value_type)
        return t.display_name if isinstance(t, BuiltinValueType) else None
