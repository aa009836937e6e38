"""
Typed error classes for abi_selector.

Decoding aborts on the first problem and surfaces one of these to the caller.
Everything derives from `SelectorError`, so callers that do not care about the
exact failure mode can catch the base class (it is also a ValueError).
"""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

__all__ = [
    "SelectorError",
    "SignatureFormatError",
    "UnsupportedTypeError",
    "MalformedIntegerError",
    "ABITypeError",
]


class SelectorError(ValueError):
    """
    Base class for all abi_selector errors.

    Attributes:
        code: short machine-readable code string
        message: human-readable message
        context: optional extra fields for debugging
    """

    default_code = "abi.error"

    def __init__(
        self,
        message: str = "",
        *,
        code: Optional[str] = None,
        context: Optional[Mapping[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.context: Dict[str, Any] = dict(context or {})

    def to_dict(self) -> Dict[str, Any]:
        return {
            "code": self.code,
            "message": self.message,
            "context": dict(self.context),
        }


class SignatureFormatError(SelectorError):
    """Top-level text does not have the `name(type,...)` shape."""

    default_code = "abi.signature_format"


class _TextError(SelectorError):
    def __init__(self, message: str, text: str, **kwargs: Any) -> None:
        ctx = dict(kwargs.pop("context", None) or {})
        ctx.setdefault("text", text)
        super().__init__(message, context=ctx, **kwargs)
        self.text = text


class UnsupportedTypeError(_TextError):
    """A type token matches none of the recognized forms."""

    default_code = "abi.unsupported_type"

    def __init__(self, text: str, reason: Optional[str] = None, **kwargs: Any) -> None:
        msg = f"Unsupported type: {text}"
        if reason:
            msg = f"{msg} ({reason})"
        super().__init__(msg, text, **kwargs)


class MalformedIntegerError(_TextError):
    """A bit-size or array-length suffix is not a clean decimal digit run."""

    default_code = "abi.malformed_integer"

    def __init__(self, text: str, *, where: str = "integer", **kwargs: Any) -> None:
        super().__init__(f"malformed {where}: {text!r}", text, **kwargs)


class ABITypeError(SelectorError, TypeError):
    """Raised when a type node is constructed with invalid fields."""

    default_code = "abi.type_error"
