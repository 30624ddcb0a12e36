#!/usr/bin/env python3

# Copyright (C) 2020-2022 The zerucrypt developers
#
# This file is part of zerucrypt. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of zerucrypt including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `zerucrypt.signable` module."

import dataclasses
from dataclasses import dataclass
from typing import List

import pytest

from zerucrypt import bms
from zerucrypt.exceptions import AddressMismatch, ZerucryptTypeError
from zerucrypt.signable import (
    SIGNATURE,
    SKIP,
    Signable,
    canonical_json,
    sign_field,
    signable_type,
)

WIF = "5KYZdUEo39z3FPrtuX2QbbwGnNP5zTd7yyr2SC1j299sBCnWjss"
ADDRESS = "1HZwkjkeaoZfTSaJxDw6aKkxp45agDiEzN"


@dataclass(frozen=True)
class Content(Signable):
    address: str
    modified: int
    title: str = ""
    files: List[str] = dataclasses.field(default_factory=list)
    signs: str = sign_field(SIGNATURE, default="")
    cached: bool = sign_field(SKIP, default=False)


@dataclass
class Unsigned(Signable):
    data: str


def test_canonical_json() -> None:
    assert canonical_json({"b": 1, "a": [1, 2]}) == b'{"a": [1, 2], "b": 1}'
    assert canonical_json({"a": 1, "b": 2}) == canonical_json({"b": 2, "a": 1})
    assert canonical_json({"t": "caffè"}) == '{"t": "caffè"}'.encode("utf-8")
    assert canonical_json({"n": {"y": None, "x": True}}) == (
        b'{"n": {"x": true, "y": null}}'
    )


def test_signable_view() -> None:
    content = Content(ADDRESS, 1, "caffè", ["index.html"], "old sig", True)

    assert Content.signature_field() == "signs"
    assert content.signable_dict() == {
        "address": ADDRESS,
        "modified": 1,
        "title": "caffè",
        "files": ["index.html"],
    }
    exp = '{"address": "' + ADDRESS + '", "files": ["index.html"], '
    exp += '"modified": 1, "title": "caffè"}'
    assert content.signable_bytes() == exp.encode("utf-8")

    # excluded fields are still part of the serialized record
    assert content.to_dict()["signs"] == "old sig"
    assert Content.from_json(content.to_json()) == content


def test_sign() -> None:
    content = Content(ADDRESS, 1, "title", ["index.html"])

    signed = content.sign(WIF)
    assert content.signs == ""
    assert signed.signs != ""
    assert signed.signature() == signed.signs
    assert signed.signs == bms.sign_b64(content.signable_bytes(), WIF)
    assert signed.is_signed_by(ADDRESS)
    signed.assert_signed_by(ADDRESS)

    # skipped and signature fields do not change the signed payload
    assert dataclasses.replace(signed, cached=True).is_signed_by(ADDRESS)
    assert signed.sign(WIF) == signed

    tampered = dataclasses.replace(signed, modified=2)
    assert not tampered.is_signed_by(ADDRESS)
    with pytest.raises(AddressMismatch):
        tampered.assert_signed_by(ADDRESS)

    wif, addr = bms.gen_keys()
    assert not signed.is_signed_by(addr)
    assert content.sign(wif).is_signed_by(addr)


def test_sign_with() -> None:
    content = Content(ADDRESS, 1)
    payloads = []

    def signer(data: bytes) -> str:
        payloads.append(data)
        return "signature"

    signed = content.sign_with(signer)
    assert signed.signs == "signature"
    assert payloads == [content.signable_bytes()]
    assert not signed.is_signed_by(ADDRESS)


def test_exceptions() -> None:

    with pytest.raises(ZerucryptTypeError, match="invalid sign field role: "):
        sign_field("sign")

    err_msg = "Unsigned must have exactly one signature field, not 0"
    with pytest.raises(ZerucryptTypeError, match=err_msg):
        Unsigned("data").signable_bytes()
    with pytest.raises(ZerucryptTypeError, match=err_msg):
        signable_type(Unsigned)

    with pytest.raises(ZerucryptTypeError, match="exactly one signature field, not 2"):

        @signable_type
        @dataclass
        class TwoSignatures(Signable):
            sig1: str = sign_field(SIGNATURE, default="")
            sig2: str = sign_field(SIGNATURE, default="")

    with pytest.raises(ZerucryptTypeError, match="not a dataclass: "):
        Signable.signature_field()

    assert signable_type(Content) is Content
