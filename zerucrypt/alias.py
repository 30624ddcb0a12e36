#!/usr/bin/env python3

# Copyright (C) 2020-2022 The zerucrypt developers
#
# This file is part of zerucrypt. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of zerucrypt including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Aliases

mypy aliases, documenting also coding input conventions.
"""

from typing import Callable, Union

# Octets are a sequence of eight-bit bytes or a hex-string (not text string)
#
# hex-strings are strings that can be converted to bytes using bytes.fromhex,
# e.g.:
# "04 8f3a1f2c..."
# "fa4c243fbcf63952d2be831e5015c274ca1d668514cd220bd7b1ff94a6826ba1"
#
# use zerucrypt.utils.bytes_from_octets to convert Octets to bytes
#
# Octets are used for serialized public keys, h160 (20 bytes),
# h256 (32 bytes), raw private keys (32 bytes), etc.
Octets = Union[bytes, str]

# bytes or text string (not hex-string)
#
# this is for string that can be
# converted to bytes using encode()
# e.g. a message to be signed
#    if isinstance(msg, str):
#        msg = msg.encode()
#
# or 'ascii' strings like base58 addresses, WIFs,
# and base64 message signatures:
# "1HZwkjkeaoZfTSaJxDw6aKkxp45agDiEzN"
# "5KYZdUEo39z3FPrtuX2QbbwGnNP5zTd7yyr2SC1j299sBCnWjss"
#
# In almost all cases (but messages to be signed)
# leading/trailing blanks should always be stripped
#     if isinstance(b58addr, str):
#         b58addr = b58addr.strip()
String = Union[bytes, str]

# a function turning the signable payload into a base64 signature
Signer = Callable[[bytes], str]
