"""
Typed values for the command grammar.

A TypedValue pairs one of a closed set of value kinds (u8, f32, String)
with either a concrete payload or None, meaning "any value of this kind".
Each ValueKind knows how to validate a payload at construction time, how to
parse user input and how to render a payload canonically.
"""
import math
import re
import struct
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Any, Callable, NamedTuple, Optional

from ..constants import ANY_LABEL_PREFIX


class GrammarError(ValueError):
    """Raised when a grammar is constructed with an invalid node or value."""


U8_MAX = 255

_U8_PATTERN = re.compile(r"\+?[0-9]+")
_F32_PATTERN = re.compile(
    r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf|infinity|nan)",
    re.IGNORECASE | re.ASCII,
)


class ValueKind(Enum):
    """Closed set of value kinds a grammar node can hold."""
    U8 = "u8"
    F32 = "f32"
    TEXT = "String"

    @property
    def label(self) -> str:
        """Placeholder shown for an open value of this kind, e.g. 'Any u8'."""
        return f"{ANY_LABEL_PREFIX} {self.value}"

    def coerce(self, value: Any) -> Any:
        """Validate a concrete payload, returning its stored form."""
        return _HANDLERS[self].coerce(value)

    def parse(self, text: str) -> Optional[Any]:
        """Parse user input as this kind. Returns None when it does not parse."""
        return _HANDLERS[self].parse(text)

    def format(self, value: Any) -> str:
        """Render a concrete payload in its canonical string form."""
        return _HANDLERS[self].format(value)


def to_f32(value: float) -> float:
    """Round a Python float to IEEE-754 single precision."""
    return struct.unpack("f", struct.pack("f", value))[0]


def _coerce_u8(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise GrammarError(f"u8 value must be an int, got {type(value).__name__}")
    if not 0 <= value <= U8_MAX:
        raise GrammarError(f"u8 value out of range: {value}")
    return value


def _parse_u8(text: str) -> Optional[int]:
    if not _U8_PATTERN.fullmatch(text):
        return None
    value = int(text)
    if value > U8_MAX:
        return None
    return value


def _coerce_f32(value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise GrammarError(f"f32 value must be a number, got {type(value).__name__}")
    try:
        return to_f32(float(value))
    except OverflowError:
        raise GrammarError(f"f32 value out of range: {value}") from None


def _parse_f32(text: str) -> Optional[float]:
    if not _F32_PATTERN.fullmatch(text):
        return None
    value = float(text)
    try:
        return to_f32(value)
    except OverflowError:
        # Out-of-range literals saturate instead of failing
        return math.copysign(math.inf, value)


def _format_f32(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"

    # Shortest representation that survives a round trip through f32
    text = repr(value)
    for precision in range(1, 10):
        candidate = f"{value:.{precision}g}"
        try:
            if to_f32(float(candidate)) == value:
                text = candidate
                break
        except OverflowError:
            continue

    return format(Decimal(text), "f")


def _coerce_text(value: Any) -> str:
    if not isinstance(value, str):
        raise GrammarError(f"String value must be a str, got {type(value).__name__}")
    return value


def _parse_text(text: str) -> str:
    return text


class _KindHandler(NamedTuple):
    coerce: Callable[[Any], Any]
    parse: Callable[[str], Optional[Any]]
    format: Callable[[Any], str]


_HANDLERS: dict[ValueKind, _KindHandler] = {
    ValueKind.U8: _KindHandler(_coerce_u8, _parse_u8, str),
    ValueKind.F32: _KindHandler(_coerce_f32, _parse_f32, _format_f32),
    ValueKind.TEXT: _KindHandler(_coerce_text, _parse_text, str),
}

_missing = [kind.name for kind in ValueKind if kind not in _HANDLERS]
if _missing:
    raise RuntimeError(f"No handler registered for value kinds: {', '.join(_missing)}")


@dataclass(frozen=True)
class TypedValue:
    """A value kind plus an optional concrete payload.

    Attributes:
        kind: The ValueKind of this value.
        value: The concrete payload, or None for "any value of this kind".
    """
    kind: ValueKind
    value: Any = None

    def __post_init__(self) -> None:
        if not isinstance(self.kind, ValueKind):
            raise GrammarError(f"Unknown value kind: {self.kind!r}")
        if self.value is not None:
            object.__setattr__(self, "value", self.kind.coerce(self.value))

    @property
    def is_any(self) -> bool:
        """True when this value stands for any value of its kind."""
        return self.value is None

    def representative_string(self) -> str:
        """Canonical display/completion string for this value."""
        if self.value is None:
            return self.kind.label
        return self.kind.format(self.value)

    def __str__(self) -> str:
        return self.representative_string()
