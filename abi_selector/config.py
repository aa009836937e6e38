"""
abi_selector.config — parser feature flags and size caps.

No third-party deps; safe to import very early.

Configuration precedence:
  1) Environment variables (ABI_SELECTOR_*)
  2) Hardcoded safe defaults below

Key env vars (case-insensitive where boolean):
  - ABI_SELECTOR_STRICT                (bool)   default: false
  - ABI_SELECTOR_MAX_SIGNATURE_LENGTH  (int)    default: 4096
  - ABI_SELECTOR_MAX_PARAMS            (int)    default: 256

Strict mode only narrows uint widths to multiples of 8 in 8..256; every other
rule of the grammar applies regardless.

Usage:
    from abi_selector.config import load_config
    CFG = load_config()
    if CFG.strict_mode: ...
"""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from functools import lru_cache
from typing import Any, Dict


# ----------------------------- helpers ---------------------------------------


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    val = raw.strip().lower()
    return val in ("1", "true", "t", "yes", "y", "on")


def _env_int(name: str, default: int, *, min_v: int, max_v: int) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        v = int(raw, 0)
    except ValueError:
        return default
    if v < min_v:
        return min_v
    if v > max_v:
        return max_v
    return v


# ------------------------------- config --------------------------------------


@dataclass(frozen=True)
class SelectorConfig:
    # Feature flags
    strict_mode: bool = False

    # Caps (enforced by the decoder)
    max_signature_length: int = 4096
    max_params: int = 256

    def as_dict(self) -> Dict[str, Any]:
        return {
            "strict_mode": self.strict_mode,
            "max_signature_length": self.max_signature_length,
            "max_params": self.max_params,
        }

    def with_overrides(self, **changes: Any) -> "SelectorConfig":
        return replace(self, **changes)


@lru_cache(maxsize=1)
def load_config() -> SelectorConfig:
    """
    Build and cache a SelectorConfig from environment + safe defaults.
    Call `load_config.cache_clear()` after changing the environment.
    """
    return SelectorConfig(
        strict_mode=_env_bool("ABI_SELECTOR_STRICT", False),
        max_signature_length=_env_int(
            "ABI_SELECTOR_MAX_SIGNATURE_LENGTH", 4096, min_v=64, max_v=1_048_576
        ),
        max_params=_env_int("ABI_SELECTOR_MAX_PARAMS", 256, min_v=1, max_v=65_535),
    )


__all__ = ["SelectorConfig", "load_config"]
