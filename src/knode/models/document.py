from __future__ import annotations
import json
from pathlib import Path
from typing import BinaryIO, List
from pydantic import BaseModel, ConfigDict, Field
from .common import (
    Position, Connection, BuiltinNodeType, BuiltinValueType,
    resolve_node_type, resolve_value_type,
)
from .instance import Instance
from .socket import Socket


class OutputRoot(BaseModel):
    model_config = ConfigDict(frozen=True)

    position: Position
    connections: List[Connection] = Field(default_factory=list)


class KnodeDocument(BaseModel):
    model_config = ConfigDict(frozen=True)

    version: int = Field(..., ge=0, le=0xFF)
    input_root: Position
    output_root: OutputRoot
    nodes: List[str] = Field(default_factory=list)
    types: List[str] = Field(default_factory=list)
    instances: List[Instance] = Field(default_factory=list)

    @classmethod
    def from_binary(cls, data: bytes | bytearray | memoryview | str | Path) -> "KnodeDocument":
        from ..binary.reader import decode_buffer, decode_file
        if isinstance(data, (bytes, bytearray, memoryview)):
            return decode_buffer(data)
        return decode_file(data)

    @classmethod
    def from_stream(cls, stream: BinaryIO) -> "KnodeDocument":
        from ..binary.reader import decode_stream
        return decode_stream(stream)

    def to_json(self, *, indent: int | None = 2) -> str:
        return json.dumps(self.model_dump(mode="json"), indent=indent)

    # Lookups below do not range-check against the tables; a dangling
    # index yields None.

    def node_path(self, instance: Instance) -> str | None:
        t = resolve_node_type(instance.type)
        if isinstance(t, BuiltinNodeType):
            return t.display_name
        return self.nodes[t] if t < len(self.nodes) else None

    def value_type_name(self, socket: Socket) -> str | None:
        t = resolve_value_type(socket.value_type)
        if isinstance(t, BuiltinValueType):
            return t.display_name
        return self.types[t] if t < len(self.types) else None
