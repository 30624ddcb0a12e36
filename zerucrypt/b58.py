#!/usr/bin/env python3

# Copyright (C) 2020-2022 The zerucrypt developers
#
# This file is part of zerucrypt. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of zerucrypt including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Base58 address and WIF functions.

Base58 encoding of uncompressed public keys as P2PKH addresses,
private keys as (uncompressed) WIFs.
"""

from typing import Optional, Tuple

from zerucrypt.alias import Octets, String
from zerucrypt.base58 import b58decode, b58encode
from zerucrypt.exceptions import ZerucryptValueError
from zerucrypt.hashes import hash160
from zerucrypt.network import get_network, network_from_key_value
from zerucrypt.secp256k1 import N_SIZE
from zerucrypt.to_prv_key import PrvKey, bytes_from_prv_key, prv_key_from_wif
from zerucrypt.utils import bytes_from_octets

__all__ = [
    "address_from_h160",
    "h160_from_address",
    "p2pkh",
    "prv_key_from_wif",
    "wif_from_prv_key",
]


def wif_from_prv_key(prv_key: PrvKey, network: Optional[str] = None) -> str:
    """Return the (uncompressed) WIF encoding of a private key.

    [1-byte version][32-bytes private key][4-bytes checksum]
    """

    payload = b"".join(
        [
            get_network(network).wif,
            bytes_from_prv_key(prv_key),
        ]
    )
    return b58encode(payload).decode("ascii")


def address_from_h160(h160: Octets, network: Optional[str] = None) -> str:
    "Return a base58 P2PKH address from the public key hash."

    payload = get_network(network).p2pkh + bytes_from_octets(h160, 20)
    return b58encode(payload).decode("ascii")


def h160_from_address(b58addr: String) -> Tuple[bytes, str]:
    "Return the public key hash and the network of a base58 P2PKH address."

    if isinstance(b58addr, str):
        b58addr = b58addr.strip()
    payload = b58decode(b58addr, 21)
    prefix = payload[:1]

    network = network_from_key_value("p2pkh", prefix)
    if network is None:
        err_msg = f"invalid base58 address prefix: 0x{prefix.hex()}"
        raise ZerucryptValueError(err_msg)
    return payload[1:], network


def p2pkh(pub_key: Octets, network: Optional[str] = None) -> str:
    "Return the P2PKH base58 address of an uncompressed public key."

    pub_key = bytes_from_octets(pub_key, 2 * N_SIZE + 1)
    if pub_key[0] != 0x04:
        raise ZerucryptValueError(f"not an uncompressed public key: {pub_key.hex()}")
    return address_from_h160(hash160(pub_key), network)
