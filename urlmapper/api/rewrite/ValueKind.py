"""Closed set of value shapes the structural rewriter understands."""

import types
from collections.abc import Mapping
from enum import Enum
from typing import Any

# Objects with attributes that are still not data records.
_NOT_RECORDS = (type, Enum, types.ModuleType, types.FunctionType, types.BuiltinFunctionType, types.MethodType)


class ValueKind(Enum):
    STRING = "string"
    SEQUENCE = "sequence"
    RECORD = "record"
    OTHER = "other"

    @classmethod
    def of(cls, value: Any) -> "ValueKind":
        """Classify ``value``.

        Lists and tuples are sequences. Mappings and plain objects carrying
        instance attributes are records. bytes, numbers, None and everything
        else fall into OTHER and are never rewritten.
        """
        if isinstance(value, str):
            return cls.STRING
        if isinstance(value, (list, tuple)):
            return cls.SEQUENCE
        if isinstance(value, Mapping):
            return cls.RECORD
        if hasattr(value, "__dict__") and not isinstance(value, _NOT_RECORDS):
            return cls.RECORD
        return cls.OTHER
