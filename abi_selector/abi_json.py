"""
Build FunctionSelectors from JSON ABI entries, e.g.

    {"type": "function", "name": "startExit",
     "inputs": [{"type": "uint256"},
                {"type": "tuple", "components": [{"type": "address"}, {"type": "bool"}]}]}

Tuple inputs are rendered from their components, and the resulting text goes
through the signature decoder so the same grammar rules apply.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, Mapping, Optional

from .config import SelectorConfig
from .errors import SignatureFormatError
from .selector import FunctionSelector, decode, encode

__all__ = ["input_type_text", "signature_from_abi", "selector_from_abi", "selectors_from_abi"]


def input_type_text(param: Mapping[str, Any]) -> str:
    typ = param.get("type")
    if not isinstance(typ, str):
        raise SignatureFormatError(f"ABI input without a type: {dict(param)!r}")
    if typ == "tuple":
        components = param.get("components") or []
        return "(" + ",".join(input_type_text(c) for c in components) + ")"
    return typ


def signature_from_abi(entry: Mapping[str, Any]) -> str:
    kind = entry.get("type", "function")
    if kind == "constructor":
        name = "constructor"
    elif kind == "function":
        name = entry.get("name")
        if not isinstance(name, str) or not name:
            raise SignatureFormatError("ABI function entry has no name")
    else:
        raise SignatureFormatError(f"not a function ABI entry (type={kind!r})")
    inputs = entry.get("inputs") or []
    return f"{name}(" + ",".join(input_type_text(i) for i in inputs) + ")"


def selector_from_abi(
    entry: Mapping[str, Any], *, config: Optional[SelectorConfig] = None
) -> FunctionSelector:
    return decode(signature_from_abi(entry), config=config)


def selectors_from_abi(
    abi: Iterable[Mapping[str, Any]], *, config: Optional[SelectorConfig] = None
) -> Dict[str, FunctionSelector]:
    """
    Map canonical signature -> selector for every function/constructor entry.

    Overloads (e.g. two `safeTransferFrom` entries) get one key each. Other
    entry types are skipped.
    """
    out: Dict[str, FunctionSelector] = {}
    for entry in abi:
        if entry.get("type", "function") not in ("function", "constructor"):
            continue
        sel = selector_from_abi(entry, config=config)
        out[encode(sel)] = sel
    return out
