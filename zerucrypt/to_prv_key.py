#!/usr/bin/env python3

# Copyright (C) 2020-2022 The zerucrypt developers
#
# This file is part of zerucrypt. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of zerucrypt including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Functions for conversions between different private key formats."

import logging
from typing import Optional, Union

from zerucrypt.alias import String
from zerucrypt.base58 import checksum, split_checksum
from zerucrypt.exceptions import PrivateKeyFailure
from zerucrypt.network import network_from_key_value
from zerucrypt.secp256k1 import N, N_SIZE
from zerucrypt.utils import bytes_from_octets

logger = logging.getLogger(__name__)

# private key inputs:
# integer as Union[int, Octets]
# WIF as String
PrvKey = Union[int, bytes, str]

# the constant checksum appended by early ZeroNet key generators
# instead of the real one: such WIFs are accepted as well
LEGACY_WIF_SUFFIX = bytes([92, 91, 187, 38])


def prv_key_from_wif(
    wif: String, network: Optional[str] = None, strict: bool = True
) -> bytes:
    """Return the 32-bytes private key encoded in an uncompressed WIF.

    The WIF suffix must be the base58 checksum or LEGACY_WIF_SUFFIX,
    unless strict is False: in that case the suffix is not verified.
    If network is given, the WIF version byte must match it.
    """

    if isinstance(wif, str):
        wif = wif.strip()

    try:
        payload, suffix = split_checksum(wif)
    except ValueError as e:
        raise PrivateKeyFailure(f"invalid wif: {e}") from e

    if suffix == LEGACY_WIF_SUFFIX:
        logger.debug("legacy wif suffix")
    elif suffix != checksum(payload):
        if strict:
            err_msg = f"invalid wif: invalid checksum: 0x{suffix.hex()}"
            err_msg += f" instead of 0x{checksum(payload).hex()}"
            raise PrivateKeyFailure(err_msg)
        logger.debug("wif checksum not verified")

    net = network_from_key_value("wif", payload[:1])
    if net is None:
        raise PrivateKeyFailure(f"invalid wif prefix: {payload[:1]!r}")
    if network is not None and net != network.strip().lower():
        raise PrivateKeyFailure(f"not a {network} wif: {wif!r}")

    if len(payload) != N_SIZE + 1:
        raise PrivateKeyFailure(f"wrong WIF size: {len(payload)}")

    prv_key = payload[1:]
    q = int.from_bytes(prv_key, byteorder="big")
    if not 0 < q < N:
        raise PrivateKeyFailure(f"private key {hex(q)} not in [1, n-1]")

    return prv_key


def bytes_from_prv_key(prv_key: PrvKey) -> bytes:
    """Return a verified-as-valid 32-bytes private key.

    It supports:

    - WIF (bytes or string)
    - 32 Octets (bytes or hex-string)
    - integer (native int)
    """

    if isinstance(prv_key, int):
        q = prv_key
    else:
        try:
            return prv_key_from_wif(prv_key)
        except PrivateKeyFailure:
            pass

        # it must be octets
        try:
            prv_key = bytes_from_octets(prv_key, N_SIZE)
        except ValueError as e:
            raise PrivateKeyFailure(f"not a private key: {prv_key!r}") from e
        q = int.from_bytes(prv_key, "big")

    if not 0 < q < N:
        raise PrivateKeyFailure(f"private key not in 1..n-1: {hex(q).upper()}")

    return q.to_bytes(N_SIZE, byteorder="big", signed=False)
