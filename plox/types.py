"""Runtime value model for the Lox interpreter.

Every value produced or consumed by the interpreter is a `Value`: a closed
tagged union whose `kind` names the active variant and whose `payload`
holds that variant's data (None for nil). Values are immutable; every
operation builds a new one.

The model also carries an integer variant. Source programs never produce
it, since numeric literals always decode to floats, but host code that
embeds the interpreter can construct integers directly and they take part
in arithmetic and comparisons as ordinary numbers.
"""

from __future__ import annotations

import enum
import json
import math
from dataclasses import dataclass
from typing import Any


class ValueKind(enum.Enum):
    STRING = 'string'
    NUMBER = 'number'
    INTEGER = 'integer'
    BOOLEAN = 'boolean'
    NIL = 'nil'


@dataclass(frozen=True)
class Value:
    """A Lox runtime value.

    Build values through the constructors (`Value.number(2.0)`,
    `Value.string("a")`, ...) rather than directly so that the payload
    always matches the kind.
    """
    kind: ValueKind
    payload: Any = None

    # Convenience constructors
    @staticmethod
    def string(s: str) -> 'Value':
        return Value(ValueKind.STRING, str(s))

    @staticmethod
    def number(n: float) -> 'Value':
        return Value(ValueKind.NUMBER, float(n))

    @staticmethod
    def integer(i: int) -> 'Value':
        return Value(ValueKind.INTEGER, int(i))

    @staticmethod
    def boolean(b: bool) -> 'Value':
        return TRUE if b else FALSE

    @staticmethod
    def nil() -> 'Value':
        return NIL

    @staticmethod
    def from_python(obj: Any) -> 'Value':
        """Wrap a host object; None, bool, int, float and str are supported."""
        if obj is None:
            return NIL
        if isinstance(obj, Value):
            return obj
        # bool is a subclass of int; check it first
        if isinstance(obj, bool):
            return Value.boolean(obj)
        if isinstance(obj, int):
            return Value.integer(obj)
        if isinstance(obj, float):
            return Value.number(obj)
        if isinstance(obj, str):
            return Value.string(obj)
        raise TypeError(f"cannot convert {type(obj).__name__} to a Lox value")

    @property
    def is_nil(self) -> bool:
        return self.kind == ValueKind.NIL

    @property
    def is_number(self) -> bool:
        return self.kind in (ValueKind.NUMBER, ValueKind.INTEGER)

    @property
    def is_string(self) -> bool:
        return self.kind == ValueKind.STRING

    @property
    def is_boolean(self) -> bool:
        return self.kind == ValueKind.BOOLEAN

    @property
    def type_name(self) -> str:
        return self.kind.value

    def as_number(self) -> float:
        if not self.is_number:
            raise TypeError(f"expected number, got {self.type_name}")
        return float(self.payload)

    def is_truthy(self) -> bool:
        if self.kind == ValueKind.NIL:
            return False
        if self.kind == ValueKind.BOOLEAN:
            return self.payload
        if self.is_number:
            return self.payload != 0
        if self.kind == ValueKind.STRING:
            return self.payload != ''
        return True

    def equals(self, other: 'Value') -> bool:
        """Typed equality: values are only equal within the same variant.

        Numbers and integers count as the same variant and compare by
        numeric value. NaN is never equal to anything, itself included.
        """
        if self.is_number and other.is_number:
            return self.as_number() == other.as_number()
        if self.kind != other.kind:
            return False
        if self.kind == ValueKind.NIL:
            return True
        return self.payload == other.payload

    def __str__(self) -> str:
        return to_string(self)


NIL = Value(ValueKind.NIL)
TRUE = Value(ValueKind.BOOLEAN, True)
FALSE = Value(ValueKind.BOOLEAN, False)


def format_number(n: float) -> str:
    """Render a number without a superfluous fractional part."""
    if math.isfinite(n) and n == math.floor(n) and abs(n) < 1e16:
        # -0.0 prints as "-0"
        text = str(int(n))
        return '-0' if text == '0' and math.copysign(1.0, n) < 0 else text
    return repr(n)


def to_string(value: Value) -> str:
    """Convert a value to the text `print` writes.

    Strings are rendered quoted, with quotes, backslashes and control
    characters escaped.
    """
    kind = value.kind
    if kind == ValueKind.STRING:
        return json.dumps(value.payload, ensure_ascii=False)
    if kind == ValueKind.NUMBER:
        return format_number(value.payload)
    if kind == ValueKind.INTEGER:
        return str(value.payload)
    if kind == ValueKind.BOOLEAN:
        return 'true' if value.payload else 'false'
    return 'nil'
