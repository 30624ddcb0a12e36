#!/usr/bin/env python3

# Copyright (C) 2020-2022 The zerucrypt developers
#
# This file is part of zerucrypt. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of zerucrypt including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Helper functions to use the libsecp256k1 python bindings.

The elliptic curve arithmetic is delegated to libsecp256k1
through coincurve: key generation, recoverable ECDSA signatures
with RFC6979 deterministic nonce, and public key recovery.

Errors from the bindings are mapped to the zerucrypt exceptions.
"""

from typing import Tuple

from coincurve import PrivateKey, PublicKey

from zerucrypt.alias import Octets
from zerucrypt.exceptions import (
    MessageFailure,
    PrivateKeyFailure,
    PublicKeyFailure,
    RecoverableSignatureFailure,
    RecoveryIdFailure,
    ZerucryptRuntimeError,
)
from zerucrypt.utils import bytes_from_octets

# secp256k1 group order
N = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141
# byte size of scalars, x and y coordinates
N_SIZE = 32


def _msg_hash(msg_hash: Octets) -> bytes:
    try:
        return bytes_from_octets(msg_hash, N_SIZE)
    except ValueError as e:
        raise MessageFailure(f"invalid message hash: {e}") from e


def _prv_key(prv_key: Octets) -> PrivateKey:
    try:
        prv_key = bytes_from_octets(prv_key, N_SIZE)
    except ValueError as e:
        raise PrivateKeyFailure(f"not a private key: {e}") from e
    q = int.from_bytes(prv_key, byteorder="big", signed=False)
    if not 0 < q < N:
        raise PrivateKeyFailure(f"private key not in 1..n-1: {hex(q).upper()}")
    try:
        return PrivateKey(prv_key)
    except ValueError as e:  # pragma: no cover
        raise PrivateKeyFailure(f"invalid private key: {e}") from e


def gen_prv_key() -> bytes:
    "Return a new random private key, from the OS cryptographic RNG."
    return PrivateKey().secret


def pub_key_from_prv_key(prv_key: Octets) -> bytes:
    "Return the uncompressed SEC public key of a private key."
    return _prv_key(prv_key).public_key.format(compressed=False)


def sign_recoverable(msg_hash: Octets, prv_key: Octets) -> Tuple[int, bytes]:
    """Create a recoverable ECDSA signature of a 32-bytes hash.

    Return the key_id in [0, 3] and the [32-bytes r][32-bytes s]
    compact signature.
    """

    msg_hash = _msg_hash(msg_hash)
    sig = _prv_key(prv_key).sign_recoverable(msg_hash, hasher=None)
    # coincurve serializes as [32-bytes r][32-bytes s][1-byte key_id]
    if len(sig) != 2 * N_SIZE + 1:  # pragma: no cover
        raise ZerucryptRuntimeError(f"invalid recoverable signature size: {len(sig)}")
    return sig[-1], sig[:-1]


def recover_pub_key(msg_hash: Octets, sig: Octets, key_id: int) -> bytes:
    """Return the uncompressed public key recovered from a signature.

    The signature is the [32-bytes r][32-bytes s] compact encoding,
    key_id in [0, 3] selects which recovered key is returned.
    """

    if key_id not in (0, 1, 2, 3):
        raise RecoveryIdFailure(f"invalid recovery id: {key_id}")

    try:
        sig = bytes_from_octets(sig, 2 * N_SIZE)
    except ValueError as e:
        raise RecoverableSignatureFailure(f"invalid signature: {e}") from e
    r = int.from_bytes(sig[:N_SIZE], byteorder="big", signed=False)
    s = int.from_bytes(sig[N_SIZE:], byteorder="big", signed=False)
    if not 0 < r < N:
        raise RecoverableSignatureFailure(f"r not in 1..n-1: {hex(r).upper()}")
    if not 0 < s < N:
        raise RecoverableSignatureFailure(f"s not in 1..n-1: {hex(s).upper()}")

    msg_hash = _msg_hash(msg_hash)
    try:
        pub_key = PublicKey.from_signature_and_message(
            sig + bytes([key_id]), msg_hash, hasher=None
        )
    except (ValueError, TypeError) as e:
        raise PublicKeyFailure(f"public key recovery failed: {e}") from e
    return pub_key.format(compressed=False)
