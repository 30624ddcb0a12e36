#!/usr/bin/env python3

# Copyright (C) 2020-2022 The zerucrypt developers
#
# This file is part of zerucrypt. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of zerucrypt including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `zerucrypt.var_int` module."

import pytest

from zerucrypt import var_int
from zerucrypt.exceptions import ZerucryptValueError


def test_var_int_conversion() -> None:

    assert var_int.serialize(0x00) == b"\x00"
    assert var_int.serialize(0x0B) == b"\x0b"
    assert var_int.serialize(0xFC) == b"\xfc"

    assert var_int.serialize(0xFD) == b"\xfd\xfd\x00"
    assert var_int.serialize(550) == bytes.fromhex("fd2602")
    assert var_int.serialize(0xFFFF) == b"\xfd\xff\xff"

    assert var_int.serialize(0xFFFF + 1) == b"\xfe\x00\x00\x01\x00"
    assert var_int.serialize(998000) == bytes.fromhex("fe703a0f00")
    assert var_int.serialize(0xFFFFFFFF) == b"\xfe" + 4 * b"\xff"

    assert var_int.serialize(0xFFFFFFFF + 1) == b"\xff" + bytes.fromhex("0000000001000000")
    assert var_int.serialize(0xFFFFFFFFFFFFFFFF) == b"\xff" + 8 * b"\xff"


def test_exceptions() -> None:

    with pytest.raises(ZerucryptValueError, match="negative integer: "):
        var_int.serialize(-1)

    with pytest.raises(
        ZerucryptValueError, match="integer too big for var_int encoding: "
    ):
        var_int.serialize(0xFFFFFFFFFFFFFFFF + 1)
