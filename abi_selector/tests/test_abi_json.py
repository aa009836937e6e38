from __future__ import annotations

import pytest

from abi_selector import (AddressType, ArrayType, BoolType, SignatureFormatError,
                          TupleType, UIntType, UnsupportedTypeError, encode)
from abi_selector.abi_json import (selector_from_abi, selectors_from_abi,
                                   signature_from_abi)

ROOTCHAIN_ABI = [
    {"type": "constructor", "inputs": []},
    {
        "type": "function",
        "name": "startExit",
        "inputs": [
            {"name": "slot", "type": "uint64"},
            {
                "name": "prev",
                "type": "tuple",
                "components": [{"type": "address"}, {"type": "bool"}],
            },
            {"name": "owners", "type": "address[]"},
        ],
    },
    {"type": "function", "name": "deposit", "inputs": []},
    {"type": "event", "name": "Deposited", "inputs": [{"type": "uint"}]},
]


def test_signature_from_function_entry() -> None:
    assert signature_from_abi(ROOTCHAIN_ABI[1]) == "startExit(uint64,(address,bool),address[])"


def test_selector_from_function_entry() -> None:
    sel = selector_from_abi(ROOTCHAIN_ABI[1])
    assert sel.function == "startExit"
    assert sel.types == (
        UIntType(64),
        TupleType([AddressType(), BoolType()]),
        ArrayType(AddressType()),
    )


def test_constructor_entry() -> None:
    sel = selector_from_abi(ROOTCHAIN_ABI[0])
    assert encode(sel) == "constructor()"


def test_selectors_from_abi_skips_events() -> None:
    sels = selectors_from_abi(ROOTCHAIN_ABI)
    assert sorted(sels) == [
        "constructor()",
        "deposit()",
        "startExit(uint64,(address,bool),address[])",
    ]
    assert sels["deposit()"].function == "deposit"


def test_selectors_from_abi_keeps_overloads() -> None:
    erc721 = [
        {
            "type": "function",
            "name": "safeTransferFrom",
            "inputs": [{"type": "address"}, {"type": "address"}, {"type": "uint256"}],
        },
        {
            "type": "function",
            "name": "safeTransferFrom",
            "inputs": [
                {"type": "address"},
                {"type": "address"},
                {"type": "uint256"},
                {"type": "string"},
            ],
        },
    ]
    sels = selectors_from_abi(erc721)
    assert len(sels) == 2
    assert sorted(sels) == [
        "safeTransferFrom(address,address,uint256)",
        "safeTransferFrom(address,address,uint256,string)",
    ]
    assert all(sel.function == "safeTransferFrom" for sel in sels.values())


def test_uint_alias_is_canonicalized() -> None:
    sel = selector_from_abi({"type": "function", "name": "set", "inputs": [{"type": "uint"}]})
    assert encode(sel) == "set(uint256)"


@pytest.mark.parametrize(
    "entry",
    [
        {"type": "event", "name": "Deposited", "inputs": []},
        {"type": "function", "inputs": []},
        {"type": "function", "name": "f", "inputs": [{"name": "x"}]},
    ],
)
def test_bad_entries(entry) -> None:
    with pytest.raises(SignatureFormatError):
        selector_from_abi(entry)


def test_out_of_grammar_inputs() -> None:
    nested = {
        "type": "function",
        "name": "f",
        "inputs": [
            {"type": "tuple", "components": [{"type": "tuple", "components": [{"type": "bool"}]}]}
        ],
    }
    with pytest.raises(UnsupportedTypeError):
        selector_from_abi(nested)
    with pytest.raises(UnsupportedTypeError):
        selector_from_abi({"type": "function", "name": "f", "inputs": [{"type": "bytes32"}]})
