#!/usr/bin/env python3

# Copyright (C) 2020-2022 The zerucrypt developers
#
# This file is part of zerucrypt. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of zerucrypt including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `zerucrypt.hashes` module."

from zerucrypt.hashes import hash160, hash256, ripemd160, sha256


def test_empty() -> None:
    assert sha256(b"").hex() == (
        "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"
    )
    assert hash256(b"").hex() == (
        "5df6e0e2761359d30a8275058e299fcc0381534545f55cf43e41983f5d4c9456"
    )
    assert hash160(b"") == ripemd160(sha256(b""))
    assert hash160(b"").hex() == "b472a266d0bd89c13706a4132ccfb16f7c3b9fcb"


def test_hash256() -> None:
    # sha256 applied twice, not once
    assert hash256(b"abc") == sha256(sha256(b"abc"))
    assert hash256(b"abc") != sha256(b"abc")
    assert hash256(b"abc").hex() == (
        "4f8b42c22dd3729b519ba6f68d2da7cc5b2d606d05daed5ad5128cc03e6c6358"
    )


def test_hex_string_input() -> None:
    pub_key = (
        "04"
        "79be667ef9dcbbac55a06295ce870b07029bfcdb2dce28d959f2815b16f81798"
        "483ada7726a3c4655da4fbfc0e1108a8fd17b448a68554199c47d08ffb10d4b8"
    )
    assert hash160(pub_key) == hash160(bytes.fromhex(pub_key))
    assert hash160(pub_key).hex() == "91b24bf9f5288532960ac687abb035127b1d28a5"
    assert len(hash256(pub_key)) == 32
