"""
abi_selector — parse and render contract function signatures.

    >>> from abi_selector import decode, encode
    >>> sel = decode("growl(uint,address,string[])")
    >>> sel.types
    (UIntType(bits=256), AddressType(), ArrayType(element=StringType()))
    >>> encode(sel)
    'growl(uint256,address,string[])'

Public surface:
- decode(signature) -> FunctionSelector
- encode(selector) -> str
- decode_type(text) -> ABIType
- encode_type(node) -> str
- canonicalize(signature) -> str
- selector_from_abi(entry) -> FunctionSelector

Everything is pure and deterministic; values are immutable and safe to share.
"""

from __future__ import annotations

from .abi_json import selector_from_abi, selectors_from_abi
from .config import SelectorConfig, load_config
from .errors import (ABITypeError, MalformedIntegerError, SelectorError,
                     SignatureFormatError, UnsupportedTypeError)
from .grammar import decode_type, decode_type_list, encode_type
from .selector import FunctionSelector, canonicalize, decode, encode
from .types import (ABIType, AddressType, ArrayType, BoolType, FixedArrayType,
                    StringType, TupleType, UIntType)
from .version import __version__


def version() -> str:
    """Return the abi_selector semantic version string."""
    return __version__


__all__ = [
    "__version__",
    "version",
    # codec
    "decode",
    "encode",
    "canonicalize",
    "decode_type",
    "decode_type_list",
    "encode_type",
    "selector_from_abi",
    "selectors_from_abi",
    # model
    "FunctionSelector",
    "ABIType",
    "UIntType",
    "BoolType",
    "StringType",
    "AddressType",
    "ArrayType",
    "FixedArrayType",
    "TupleType",
    # config
    "SelectorConfig",
    "load_config",
    # errors
    "SelectorError",
    "SignatureFormatError",
    "UnsupportedTypeError",
    "MalformedIntegerError",
    "ABITypeError",
]
