"""
Function selectors: `name(type,...)` text <-> FunctionSelector.

    >>> decode("bark(uint,bool)")
    FunctionSelector(function='bark', types=(UIntType(bits=256), BoolType()), returns=None)
    >>> encode(decode("bark(uint,bool)"))
    'bark(uint256,bool)'

The parameter list is split on top-level commas only, so a tuple parameter may
appear anywhere in a multi-parameter signature.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Optional, Tuple

from .config import SelectorConfig, load_config
from .errors import SignatureFormatError
from .grammar import decode_type_list, encode_type
from .types import ABIType

__all__ = [
    "FunctionSelector",
    "decode",
    "encode",
    "canonicalize",
    "is_identifier",
]

log = logging.getLogger(__name__)

_IDENTIFIER_RE = re.compile(r"[a-zA-Z_$][a-zA-Z_$0-9]*")
_SIGNATURE_RE = re.compile(
    r"\s*(?P<function>[a-zA-Z_$][a-zA-Z_$0-9]*)\((?P<types>.*)\)\s*",
    re.DOTALL,
)
_OPENERS = {"(": ")", "[": "]"}
_CLOSERS = frozenset(_OPENERS.values())


def is_identifier(name: object) -> bool:
    return isinstance(name, str) and _IDENTIFIER_RE.fullmatch(name) is not None


@dataclass(frozen=True)
class FunctionSelector:
    """
    One parsed or hand-built signature.

    `returns` is carried for callers that want to attach a return type; the
    decoder never sets it and the encoder never renders it.
    """

    function: str
    types: Tuple[ABIType, ...] = ()
    returns: Optional[ABIType] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "types", tuple(self.types))

    @property
    def signature(self) -> str:
        return encode(self)

    def __str__(self) -> str:
        return encode(self)


def _check_balanced(types_text: str, signature: str) -> None:
    stack = []
    for ch in types_text:
        if ch in _OPENERS:
            stack.append(_OPENERS[ch])
        elif ch in _CLOSERS:
            if not stack or stack.pop() != ch:
                raise SignatureFormatError(
                    f"unbalanced brackets in signature: {signature!r}",
                    context={"signature": signature},
                )
    if stack:
        raise SignatureFormatError(
            f"unbalanced brackets in signature: {signature!r}",
            context={"signature": signature},
        )


def decode(signature: str, *, config: Optional[SelectorConfig] = None) -> FunctionSelector:
    """
    Decode `name(type1,type2,...)` into a FunctionSelector.

    Raises SignatureFormatError when the text is not shaped like a signature
    (or exceeds configured caps); type-level errors propagate from
    decode_type unchanged.
    """
    cfg = config or load_config()
    if not isinstance(signature, str):
        raise SignatureFormatError(f"signature must be a string, got {type(signature).__name__}")
    if len(signature) > cfg.max_signature_length:
        raise SignatureFormatError(
            f"signature too long ({len(signature)} > {cfg.max_signature_length})",
            context={"length": len(signature), "max": cfg.max_signature_length},
        )

    m = _SIGNATURE_RE.fullmatch(signature)
    if m is None:
        log.debug("not a function signature: %r", signature)
        raise SignatureFormatError(
            f"invalid function signature: {signature!r}",
            context={"signature": signature},
        )

    function, types_text = m.group("function"), m.group("types")
    _check_balanced(types_text, signature)
    types = decode_type_list(types_text, config=cfg)

    if len(types) > cfg.max_params:
        raise SignatureFormatError(
            f"too many parameters ({len(types)} > {cfg.max_params})",
            context={"params": len(types), "max": cfg.max_params},
        )

    log.debug("decoded %s with %d param(s)", function, len(types))
    return FunctionSelector(function=function, types=types, returns=None)


def encode(selector: FunctionSelector) -> str:
    """Render a FunctionSelector as canonical `name(type,...)` text."""
    if not is_identifier(selector.function):
        raise SignatureFormatError(
            f"invalid function name: {selector.function!r}",
            context={"function": selector.function},
        )
    return f"{selector.function}(" + ",".join(encode_type(t) for t in selector.types) + ")"


def canonicalize(signature: str, *, config: Optional[SelectorConfig] = None) -> str:
    """Normalize signature text, e.g. "f(uint, bool)" -> "f(uint256,bool)"."""
    return encode(decode(signature, config=config))
