#!/usr/bin/env python3

# Copyright (C) 2020-2022 The zerucrypt developers
#
# This file is part of zerucrypt. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of zerucrypt including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Varint encoding function.

This is the Bitcoin variable-length integer (a.k.a. compact size),
used in the message signing scheme to prefix the message with its
length in bytes.

Up to 0xfc, a var_int is just 1 byte; however, if the integer is greater than
0xfc, then it is expanded as [1 byte prefix][number]:

* prefix 0xfd markes the next two bytes as the number;
* prefix 0xfe markes the next four bytes as the number;
* prefix 0xff markes the next eight bytes as the number.

Numbers are little-endian.
"""

from zerucrypt.exceptions import ZerucryptValueError

# (largest value, prefix, size) for the expanded encodings
_EXPANDED = [
    (0xFFFF, b"\xFD", 2),
    (0xFFFFFFFF, b"\xFE", 4),
    (0xFFFFFFFFFFFFFFFF, b"\xFF", 8),
]


def serialize(i: int) -> bytes:
    "Return the var_int bytes encoding of an integer."

    if i < 0x00:
        raise ZerucryptValueError(f"negative integer: {i}")
    if i < 0xFD:
        return bytes([i])
    for max_value, prefix, size in _EXPANDED:
        if i <= max_value:
            return prefix + i.to_bytes(size, byteorder="little", signed=False)
    raise ZerucryptValueError(f"integer too big for var_int encoding: 0x{i:X}")
