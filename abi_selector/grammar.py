"""
Recursive-descent parser for ABI type tokens, and its inverse.

Grammar (one level of array suffix, tuples of non-tuple elements):

    type       := primitive [ "[" digits* "]" ]
                | "(" type-list ")"
    primitive  := "uint" digits* | "bool" | "string" | "address"
    type-list  := type ( "," type )*

Empty list segments (stray commas) are dropped. Arrays of arrays, arrays of
tuples, tuples nested in tuples and the empty tuple are rejected with
UnsupportedTypeError.

Top-level:
- decode_type(text, config=None) -> ABIType
- decode_type_list(text, config=None) -> tuple of ABIType
- encode_type(node) -> str
"""

from __future__ import annotations

import logging
import re
from typing import Callable, Dict, List, Optional, Tuple

from .config import SelectorConfig, load_config
from .errors import MalformedIntegerError, SelectorError, UnsupportedTypeError
from .types import (ABIType, AddressType, ArrayType, BoolType, FixedArrayType,
                    StringType, TupleType, UIntType, is_abi_type)

__all__ = [
    "decode_type",
    "decode_type_list",
    "encode_type",
]

log = logging.getLogger(__name__)

_DIGITS = re.compile(r"[0-9]+")
_DELIMITERS = frozenset("[](),")

_KEYWORDS: Dict[str, Callable[[], ABIType]] = {
    "bool": BoolType,
    "string": StringType,
    "address": AddressType,
}

_UINT_PREFIX = "uint"
_DEFAULT_UINT_BITS = 256

# Longest digit run accepted for a width or length (digits in 2**256).
_MAX_DIGITS = len(str(2**256))


# ──────────────────────────────────────────────────────────────────────────────
# Cursor
# ──────────────────────────────────────────────────────────────────────────────


class _Cursor:
    __slots__ = ("text", "pos")

    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0

    def peek(self) -> str:
        if self.pos < len(self.text):
            return self.text[self.pos]
        return ""

    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    def advance(self) -> str:
        ch = self.peek()
        self.pos += 1
        return ch

    def skip_ws(self) -> None:
        while self.pos < len(self.text) and self.text[self.pos].isspace():
            self.pos += 1

    def take_token(self) -> str:
        start = self.pos
        while self.pos < len(self.text):
            ch = self.text[self.pos]
            if ch in _DELIMITERS or ch.isspace():
                break
            self.pos += 1
        return self.text[start : self.pos]

    def take_until(self, stop: str) -> Optional[str]:
        """Consume up to and including `stop`; None if it never appears."""
        end = self.text.find(stop, self.pos)
        if end < 0:
            return None
        chunk = self.text[self.pos : end]
        self.pos = end + 1
        return chunk


# ──────────────────────────────────────────────────────────────────────────────
# Decoding
# ──────────────────────────────────────────────────────────────────────────────


def _parse_digits(text: str, *, where: str) -> int:
    if not _DIGITS.fullmatch(text):
        raise MalformedIntegerError(text, where=where)
    if len(text) > _MAX_DIGITS:
        raise MalformedIntegerError(text, where=f"{where} (more than {_MAX_DIGITS} digits)")
    return int(text)


def _decode_uint(token: str, cfg: SelectorConfig) -> UIntType:
    suffix = token[len(_UINT_PREFIX) :]
    if not suffix:
        return UIntType(_DEFAULT_UINT_BITS)
    bits = _parse_digits(suffix, where="uint bit width")
    if bits == 0:
        raise UnsupportedTypeError(token, "uint width must be positive")
    if cfg.strict_mode and (bits % 8 != 0 or bits > 256):
        raise UnsupportedTypeError(token, "bit width must be a multiple of 8 in 8..256")
    return UIntType(bits)


def _decode_primitive(token: str, cfg: SelectorConfig) -> ABIType:
    if token.startswith(_UINT_PREFIX):
        return _decode_uint(token, cfg)
    factory = _KEYWORDS.get(token)
    if factory is None:
        raise UnsupportedTypeError(token)
    return factory()


def _parse_array_suffix(cur: _Cursor, element: ABIType) -> ABIType:
    cur.advance()  # "["
    body = cur.take_until("]")
    if body is None:
        raise UnsupportedTypeError(cur.text, "unterminated array suffix")
    if cur.peek() == "[":
        raise UnsupportedTypeError(cur.text, "arrays of arrays are not supported")
    if body == "":
        return ArrayType(element)
    return FixedArrayType(element, _parse_digits(body, where="array length"))


def _parse_type(cur: _Cursor, cfg: SelectorConfig, *, in_tuple: bool) -> ABIType:
    cur.skip_ws()
    if cur.peek() == "(":
        if in_tuple:
            raise UnsupportedTypeError(cur.text, "nested tuples are not supported")
        node: ABIType = TupleType(_parse_list(cur, cfg, in_tuple=True))
        if cur.peek() == "[":
            raise UnsupportedTypeError(cur.text, "arrays of tuples are not supported")
        return node

    token = cur.take_token()
    if not token:
        raise UnsupportedTypeError(cur.text)
    node = _decode_primitive(token, cfg)
    if cur.peek() == "[":
        node = _parse_array_suffix(cur, node)
    return node


def _parse_list(cur: _Cursor, cfg: SelectorConfig, *, in_tuple: bool) -> Tuple[ABIType, ...]:
    """
    Parse comma-separated types. Inside a tuple the cursor sits on "(" and the
    list ends at the matching ")"; at the top level it runs to the end of text.
    """
    if in_tuple:
        cur.advance()  # "("
    out: List[ABIType] = []
    while True:
        cur.skip_ws()
        ch = cur.peek()
        if ch == "":
            if in_tuple:
                raise UnsupportedTypeError(cur.text, "unterminated tuple")
            break
        if ch == ")":
            if not in_tuple:
                raise UnsupportedTypeError(cur.text, "unbalanced ')'")
            cur.advance()
            break
        if ch == ",":
            cur.advance()
            continue
        out.append(_parse_type(cur, cfg, in_tuple=in_tuple))
        cur.skip_ws()
        if cur.peek() not in ("", ",", ")"):
            raise UnsupportedTypeError(cur.text)
    if in_tuple and not out:
        raise UnsupportedTypeError("()", "empty tuples are not supported")
    return tuple(out)


def _require_text(text: object) -> str:
    if not isinstance(text, str):
        raise UnsupportedTypeError(repr(text), "type spec must be a string")
    return text


def decode_type(text: str, *, config: Optional[SelectorConfig] = None) -> ABIType:
    """
    Parse one textual type (e.g. "uint", "address[]", "string[2]",
    "(uint256,bool)") into an ABIType node.

    Raises UnsupportedTypeError for unknown or out-of-grammar tokens and
    MalformedIntegerError for a bad bit width or array length.
    """
    cfg = config or load_config()
    cur = _Cursor(_require_text(text).strip())
    try:
        node = _parse_type(cur, cfg, in_tuple=False)
        cur.skip_ws()
        if not cur.at_end():
            raise UnsupportedTypeError(cur.text)
    except SelectorError as e:
        log.debug("decode_type(%r) failed: %s", text, e)
        raise
    return node


def decode_type_list(text: str, *, config: Optional[SelectorConfig] = None) -> Tuple[ABIType, ...]:
    """Parse a comma-separated list of types; commas inside tuples do not split."""
    cfg = config or load_config()
    cur = _Cursor(_require_text(text))
    try:
        return _parse_list(cur, cfg, in_tuple=False)
    except SelectorError as e:
        log.debug("decode_type_list(%r) failed: %s", text, e)
        raise


# ──────────────────────────────────────────────────────────────────────────────
# Encoding
# ──────────────────────────────────────────────────────────────────────────────


def encode_type(node: ABIType) -> str:
    """Render a type node as canonical text (bare widths always explicit)."""
    if not is_abi_type(node):
        raise UnsupportedTypeError(repr(node), "cannot encode a non-ABI value")
    return node.name
