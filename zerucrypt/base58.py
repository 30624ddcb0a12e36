#!/usr/bin/env python3

# Copyright (C) 2020-2022 The zerucrypt developers
#
# This file is part of zerucrypt. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of zerucrypt including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.


"""Base58Check encoding and decoding functions.

Base58 writes a big-endian integer with an alphabet that omits
0 (zero), O (capital o), I (capital i), and l (lower case L),
plus the '+' and '/' of base64: keys and addresses stay readable
when printed and a double-click selects the whole string.
Each leading zero byte is written as a leading '1'.

Base58Check appends the first four bytes of hash256(payload)
before encoding; decoding verifies them back.

Encoding returns ASCII bytes; decoding accepts ASCII bytes or strings.
"""

from typing import Optional, Tuple

from zerucrypt.alias import Octets, String
from zerucrypt.exceptions import ZerucryptValueError
from zerucrypt.hashes import hash256
from zerucrypt.utils import bytes_from_octets

_ALPHABET = b"123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
_INDEX = {char: i for i, char in enumerate(_ALPHABET)}

CHECKSUM_SIZE = 4


def _encode(v: bytes) -> bytes:
    "Return the plain base58 encoding of v, no checksum."

    stripped = v.lstrip(b"\0")
    n_zeros = len(v) - len(stripped)

    i = int.from_bytes(stripped, byteorder="big", signed=False)
    digits = bytearray()
    while i:
        i, idx = divmod(i, 58)
        digits.append(_ALPHABET[idx])
    digits.reverse()
    return _ALPHABET[:1] * n_zeros + bytes(digits)


def _decode(v: bytes) -> bytes:
    "Return the bytes of a plain base58 encoding, no checksum."

    i = 0
    for char in v:
        if char not in _INDEX:
            raise ZerucryptValueError("Base58 string contains invalid characters")
        i = i * 58 + _INDEX[char]

    n_ones = len(v) - len(v.lstrip(_ALPHABET[:1]))
    nbytes = (i.bit_length() + 7) // 8
    return b"\0" * n_ones + i.to_bytes(nbytes, byteorder="big", signed=False)


def checksum(payload: bytes) -> bytes:
    "Return the Base58Check checksum of a payload."
    return hash256(payload)[:CHECKSUM_SIZE]


def b58encode(v: Octets) -> bytes:
    """Encode a bytes-like object using Base58Check."""

    v = bytes_from_octets(v)
    return _encode(v + checksum(v))


def split_checksum(v: String) -> Tuple[bytes, bytes]:
    """Return payload and 4-bytes suffix of a Base58Check encoding.

    The suffix is not verified against the payload checksum.
    """

    if isinstance(v, str):
        # do not trim spaces
        v = v.encode("ascii")

    data = _decode(v)
    if len(data) < CHECKSUM_SIZE:
        err_msg = "not enough bytes for checksum, "
        err_msg += f"invalid base58 decoded size: {len(data)}"
        raise ZerucryptValueError(err_msg)
    return data[:-CHECKSUM_SIZE], data[-CHECKSUM_SIZE:]


def b58decode(
    v: String, out_size: Optional[int] = None, check_validity: bool = True
) -> bytes:
    """Decode a Base58Check encoded bytes-like object or ASCII string.

    Optionally, it also ensures required output size.
    With check_validity=False the 4-bytes suffix is dropped
    without being verified against the checksum.
    """

    payload, suffix = split_checksum(v)
    if check_validity and suffix != checksum(payload):
        err_msg = f"invalid checksum: 0x{suffix.hex()}"
        err_msg += f" instead of 0x{checksum(payload).hex()}"
        raise ZerucryptValueError(err_msg)

    if out_size is not None and len(payload) != out_size:
        err_msg = "invalid decoded size: "
        err_msg += f"{len(payload)} bytes instead of {out_size}"
        raise ZerucryptValueError(err_msg)
    return payload
