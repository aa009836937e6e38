from __future__ import annotations

import pytest

import abi_selector
from abi_selector import config as config_mod
from abi_selector import decode_type
from abi_selector.errors import (ABITypeError, MalformedIntegerError,
                                 SelectorError, SignatureFormatError,
                                 UnsupportedTypeError)


@pytest.fixture
def fresh_config(monkeypatch):
    for name in (
        "ABI_SELECTOR_STRICT",
        "ABI_SELECTOR_MAX_SIGNATURE_LENGTH",
        "ABI_SELECTOR_MAX_PARAMS",
    ):
        monkeypatch.delenv(name, raising=False)
    config_mod.load_config.cache_clear()
    yield monkeypatch
    config_mod.load_config.cache_clear()


def test_defaults(fresh_config) -> None:
    cfg = config_mod.load_config()
    assert cfg.as_dict() == {
        "strict_mode": False,
        "max_signature_length": 4096,
        "max_params": 256,
    }
    assert config_mod.load_config() is cfg


def test_env_overrides(fresh_config) -> None:
    fresh_config.setenv("ABI_SELECTOR_STRICT", "yes")
    fresh_config.setenv("ABI_SELECTOR_MAX_SIGNATURE_LENGTH", "0x400")
    fresh_config.setenv("ABI_SELECTOR_MAX_PARAMS", "16")
    cfg = config_mod.load_config()
    assert cfg.strict_mode is True
    assert cfg.max_signature_length == 1024
    assert cfg.max_params == 16


def test_env_values_are_clamped_and_garbage_ignored(fresh_config) -> None:
    fresh_config.setenv("ABI_SELECTOR_MAX_SIGNATURE_LENGTH", "1")
    fresh_config.setenv("ABI_SELECTOR_MAX_PARAMS", "lots")
    cfg = config_mod.load_config()
    assert cfg.max_signature_length == 64
    assert cfg.max_params == 256


def test_strict_env_applies_to_decoding(fresh_config) -> None:
    fresh_config.setenv("ABI_SELECTOR_STRICT", "1")
    with pytest.raises(UnsupportedTypeError):
        decode_type("uint7")


def test_with_overrides_returns_new_config() -> None:
    base = config_mod.SelectorConfig()
    strict = base.with_overrides(strict_mode=True)
    assert strict.strict_mode and not base.strict_mode


@pytest.mark.parametrize(
    "exc, code",
    [
        (SignatureFormatError("bad"), "abi.signature_format"),
        (UnsupportedTypeError("bytes32"), "abi.unsupported_type"),
        (MalformedIntegerError("8x"), "abi.malformed_integer"),
        (ABITypeError("nope"), "abi.type_error"),
    ],
)
def test_error_codes_and_hierarchy(exc: SelectorError, code: str) -> None:
    assert isinstance(exc, SelectorError)
    assert isinstance(exc, ValueError)
    assert exc.code == code
    d = exc.to_dict()
    assert d["code"] == code
    assert d["message"] == str(exc)


def test_custom_code_and_context() -> None:
    err = SignatureFormatError("x", code="custom", context={"k": 1})
    assert err.to_dict() == {"code": "custom", "message": "x", "context": {"k": 1}}


def test_version_is_exposed() -> None:
    assert isinstance(abi_selector.__version__, str)
    assert abi_selector.version() == abi_selector.__version__
