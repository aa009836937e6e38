"""
ABI type nodes for function signatures.

The set is closed and mirrors the signature grammar:
  - uint / uintN           -> UIntType(bits)        (canonical default = 256 bits)
  - bool, string, address  -> BoolType, StringType, AddressType
  - T[]                    -> ArrayType(T)
  - T[N]                   -> FixedArrayType(T, N)
  - (T1,T2,...)            -> TupleType((T1, T2, ...))

Nodes are frozen dataclasses: hashable, comparable by value, and safe to share
between threads. Each node renders its canonical text via `.name`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Tuple, Union

from .errors import ABITypeError

__all__ = [
    "UIntType",
    "BoolType",
    "StringType",
    "AddressType",
    "ArrayType",
    "FixedArrayType",
    "TupleType",
    "ABIType",
    "is_abi_type",
]


# ──────────────────────────────────────────────────────────────────────────────
# Primitives
# ──────────────────────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class UIntType:
    bits: int = 256

    def __post_init__(self) -> None:
        if isinstance(self.bits, bool) or not isinstance(self.bits, int):
            raise ABITypeError("uint bit width must be an int")
        if self.bits <= 0:
            raise ABITypeError("uint bit width must be positive")

    @property
    def name(self) -> str:
        return f"uint{self.bits}"


@dataclass(frozen=True)
class BoolType:
    @property
    def name(self) -> str:
        return "bool"


@dataclass(frozen=True)
class StringType:
    @property
    def name(self) -> str:
        return "string"


@dataclass(frozen=True)
class AddressType:
    @property
    def name(self) -> str:
        return "address"


# ──────────────────────────────────────────────────────────────────────────────
# Composites
# ──────────────────────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class ArrayType:
    element: "ABIType"

    def __post_init__(self) -> None:
        _check_element(self.element)

    @property
    def name(self) -> str:
        return f"{self.element.name}[]"


@dataclass(frozen=True)
class FixedArrayType:
    element: "ABIType"
    length: int

    def __post_init__(self) -> None:
        _check_element(self.element)
        if isinstance(self.length, bool) or not isinstance(self.length, int):
            raise ABITypeError("fixed array length must be an int")
        if self.length < 0:
            raise ABITypeError("fixed array length must be >= 0")

    @property
    def name(self) -> str:
        return f"{self.element.name}[{self.length}]"


@dataclass(frozen=True)
class TupleType:
    elements: Tuple["ABIType", ...]

    def __init__(self, elements: Iterable["ABIType"]) -> None:
        items = tuple(elements)
        for el in items:
            _check_element(el)
        object.__setattr__(self, "elements", items)

    @property
    def name(self) -> str:
        return "(" + ",".join(el.name for el in self.elements) + ")"


ABIType = Union[
    UIntType,
    BoolType,
    StringType,
    AddressType,
    ArrayType,
    FixedArrayType,
    TupleType,
]

_ALL_TYPES = (
    UIntType,
    BoolType,
    StringType,
    AddressType,
    ArrayType,
    FixedArrayType,
    TupleType,
)


def is_abi_type(value: object) -> bool:
    return isinstance(value, _ALL_TYPES)


def _check_element(value: object) -> None:
    if not is_abi_type(value):
        raise ABITypeError(f"not an ABI type node: {value!r}")
