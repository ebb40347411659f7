from __future__ import annotations
from enum import IntEnum
from types import MappingProxyType
from pydantic import BaseModel, ConfigDict, Field

# Raw 10-bit coordinates are stored with this bias added.
POSITION_BIAS = 500
POSITION_MIN = -POSITION_BIAS
POSITION_MAX = (1 << 10) - 1 - POSITION_BIAS


class Position(BaseModel):
    model_config = ConfigDict(frozen=True)

    x: int = Field(..., ge=POSITION_MIN, le=POSITION_MAX)
    y: int = Field(..., ge=POSITION_MIN, le=POSITION_MAX)


class Connection(BaseModel):
    """Reference to socket `socket` of the instance at index `instance`."""
    model_config = ConfigDict(frozen=True)

    instance: int = Field(..., ge=0, le=0xFF)
    socket: int = Field(..., ge=0, le=0xFF)


class BuiltinNodeType(IntEnum):
    PORT = 0xFF
    SETTINGS = 0xFE
    PATH = 0xFD
    BYTES = 0xFC
    JOIN = 0xFB
    OPTION = 0xFA
    CONDITION = 0xF9
    FORMAT = 0xF8
    TYPE = 0xF7
    APPLY = 0xF6
    SIZE = 0xF5
    FILE = 0xF4
    REVERSE = 0xF3
    VALUE = 0xF2
    MATH = 0xF1
    REPEAT = 0xF0
    TIME = 0xEF
    SPLIT = 0xEE
    COLLECT = 0xED

    @property
    def display_name(self) -> str:
        return BUILTIN_NODE_TYPE_NAMES[self]


class BuiltinValueType(IntEnum):
    NONE = 0xFF
    ANY = 0xFE
    REPETITION = 0xFD
    SETTINGS = 0xFC
    OPTION_THEN = 0xFB
    OPTION_WHEN = 0xFA
    SELECTION = 0xF9
    BYTES = 0xF8
    TRUTH = 0xF7
    NUMBER = 0xF6
    TEXT = 0xF5
    REPETITIVE_SELECTION = 0xF4
    REPETITIVE_BYTES = 0xF3
    REPETITIVE_TRUTH = 0xF2
    REPETITIVE_NUMBER = 0xF1
    REPETITIVE_TEXT = 0xF0
    REPETITIVE_PORT_DEFAULT = 0xEF
    REPETITIVE_PORT_VALUE = 0xEE
    PORT_DEFAULT = 0xED
    PORT_CHANNEL = 0xEC
    PORT_VALUE = 0xEB
    PATH_MODULE = 0xEA
    PATH_ABSOLUTE = 0xE9
    ROOT_OUTPUT = 0xE8
    ROOT_INPUT = 0xE7

    @property
    def display_name(self) -> str:
        return BUILTIN_VALUE_TYPE_NAMES[self]


# Type-index bytes at or above these values name a built-in, below them they
# index the document's own tables.
NODE_BUILTIN_THRESHOLD = int(min(BuiltinNodeType))
VALUE_BUILTIN_THRESHOLD = int(min(BuiltinValueType))

BUILTIN_NODE_TYPE_NAMES = MappingProxyType({
    t: "builtin:" + t.name.lower() for t in BuiltinNodeType
})

BUILTIN_VALUE_TYPE_NAMES = MappingProxyType({
    t: "builtin-type:" + t.name.lower().replace("_", " ") for t in BuiltinValueType
})


def resolve_node_type(index: int) -> BuiltinNodeType | int:
    """Built-in node type for `index`, or `index` itself as a node-path table index."""
    if index >= NODE_BUILTIN_THRESHOLD:
        return BuiltinNodeType(index)
    return index


def resolve_value_type(index: int) -> BuiltinValueType | int:
    """Built-in value type for `index`, or `index` itself as a type-name table index."""
    if index >= VALUE_BUILTIN_THRESHOLD:
        return BuiltinValueType(index)
    return index
