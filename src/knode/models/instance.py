from __future__ import annotations
from pydantic import BaseModel, ConfigDict, Field, computed_field
from typing import List
from .common import Position, BuiltinNodeType, resolve_node_type
from .socket import Socket

MAX_NAME_LENGTH = 63
MAX_SOCKETS = 63


class Instance(BaseModel):
    model_config = ConfigDict(frozen=True)

    key: int = Field(..., ge=0, le=0xFF)
    type: int = Field(..., ge=0, le=0xFF)
    name: str = Field("", max_length=MAX_NAME_LENGTH)
    position: Position
    sockets: List[Socket] = Field(default_factory=list, max_length=MAX_SOCKETS)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def builtin_type(self) -> str | None:
        t = resolve_node_type(self.type)
        return t.display_name if isinstance(t, BuiltinNodeType) else None
