#!/usr/bin/env python3

# Copyright (C) 2020-2022 The zerucrypt developers
#
# This file is part of zerucrypt. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of zerucrypt including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Bitcoin message signing (BMS).

Bitcoin uses a P2PKH address-based scheme for message signature: such
a signature does prove the control of the private key corresponding to
the address. ZeroNet uses the very same scheme to sign site content.

To mitigate the risk of signing a possibly deceiving message,
for any given message a *magic* "Bitcoin Signed Message:\\n" prefix is
added, then the hash256 of the resulting message is signed:

    hash256([var_int len(prefix)][prefix][var_int len(msg)][msg])

where the message is the UTF-8 encoding of the text.

This BMS scheme relies on ECDSA,
i.e. it works with private/public key pairs, not addresses:
the address is only used to identify a key pair.

To verify the ECDSA signature the public key is not needed
because (EC)DSA allows public key recovery:
public keys that correctly verify the signature
can be implied from the signature itself.
In the case of the Bitcoin secp256k1 curve,
two public keys are recovered
(up to four with non-zero but negligible probability);
at verification time the address must match
that public key in the recovery set
marked as the right one at signature time.

The (r, s) DSA signature is serialized as
[1-byte recovery flag][32-bytes r][32-bytes s],
in a compact 65-bytes (fixed-size) encoding,
then it is base64-encoded to transport it
across channels that are designed to deal with textual data.

The recovery flag is:

    key_id + (4 if compressed else 0) + 27

Only uncompressed P2PKH addresses are supported here:
signatures are always generated with rf in [27, 30].
At verification time only the key_id bits of rf - 27 are used,
any header byte is accepted; the public key is always serialized
uncompressed before being hashed into the address.

https://github.com/bitcoin/bitcoin/pull/524
"""

import base64
import binascii
import logging
from dataclasses import InitVar, dataclass
from typing import Optional, Tuple, Type, TypeVar, Union

from zerucrypt import secp256k1, var_int
from zerucrypt.alias import String
from zerucrypt.b58 import p2pkh, wif_from_prv_key
from zerucrypt.exceptions import (
    AddressMismatch,
    DecodeSignatureFailure,
    MessageFailure,
    RecoverableSignatureFailure,
)
from zerucrypt.hashes import hash256
from zerucrypt.network import get_network
from zerucrypt.secp256k1 import N, N_SIZE
from zerucrypt.to_prv_key import PrvKey, bytes_from_prv_key
from zerucrypt.utils import bytes_from_text

logger = logging.getLogger(__name__)

_REQUIRED_LENGTH = 1 + 2 * N_SIZE

_Sig = TypeVar("_Sig", bound="Sig")


@dataclass(frozen=True)
class Sig:
    # 1 byte
    rf: int
    r: int
    s: int
    check_validity: InitVar[bool] = True

    def __post_init__(self, check_validity: bool) -> None:
        if check_validity:
            self.assert_valid()

    @property
    def key_id(self) -> int:
        # the low two bits of rf - 27 (mod 256) are the key_id,
        # any other bit, e.g. the compressed flag, is ignored
        return (self.rf - 27) & 0b11

    def assert_valid(self) -> None:
        # any header byte is accepted
        if not 0 <= self.rf <= 0xFF:
            raise RecoverableSignatureFailure(f"invalid recovery flag: {self.rf}")
        if not 0 < self.r < N:
            raise RecoverableSignatureFailure(f"r not in 1..n-1: {hex(self.r).upper()}")
        if not 0 < self.s < N:
            raise RecoverableSignatureFailure(f"s not in 1..n-1: {hex(self.s).upper()}")

    def serialize(self, check_validity: bool = True) -> bytes:

        if check_validity:
            self.assert_valid()

        # [1-byte recovery flag][32-bytes r][32-bytes s]
        return b"".join(
            [
                self.rf.to_bytes(1, byteorder="big", signed=False),
                self.r.to_bytes(N_SIZE, byteorder="big", signed=False),
                self.s.to_bytes(N_SIZE, byteorder="big", signed=False),
            ]
        )

    def b64encode(self, check_validity: bool = True) -> str:
        """Return the BMS address-based signature as base64-encoding.

        First off, the signature is serialized in the
        [1-byte rf][32-bytes r][32-bytes s] compact format,
        then it is base64-encoded.
        """
        data_binary = self.serialize(check_validity)
        return base64.b64encode(data_binary).decode("ascii")

    @classmethod
    def parse(cls: Type[_Sig], data: bytes, check_validity: bool = True) -> _Sig:

        if not data:
            raise DecodeSignatureFailure("empty signature")

        if len(data) != _REQUIRED_LENGTH:
            err_msg = f"invalid decoded length: {len(data)}"
            err_msg += f" instead of {_REQUIRED_LENGTH}"
            raise RecoverableSignatureFailure(err_msg)

        rf = data[0]
        r = int.from_bytes(data[1 : 1 + N_SIZE], "big", signed=False)
        s = int.from_bytes(data[1 + N_SIZE :], "big", signed=False)

        return cls(rf, r, s, check_validity)

    @classmethod
    def b64decode(cls: Type[_Sig], data: String, check_validity: bool = True) -> _Sig:
        """Return the verified components of the provided BMS signature.

        The address-based BMS signature is the base64-encoding
        of the compact format [1-byte rf][32-bytes r][32-bytes s].
        """

        if isinstance(data, str):
            data = data.strip()

        try:
            data_decoded = base64.b64decode(data, validate=True)
        except (binascii.Error, ValueError) as e:
            raise DecodeSignatureFailure(f"invalid base64 signature: {e}") from e
        return cls.parse(data_decoded, check_validity)


def msg_hash(msg: String, network: Optional[str] = None) -> bytes:
    "Return the hash256 of the magic-prefixed message, i.e. what is signed."

    msg = bytes_from_text(msg)
    t = b"".join(
        [
            get_network(network).magic_prefix,
            var_int.serialize(len(msg)),
            msg,
        ]
    )
    return hash256(t)


def gen_keys(
    prv_key: Optional[PrvKey] = None, network: Optional[str] = None
) -> Tuple[str, str]:
    """Return a private/public key pair.

    The private key is a WIF, the public key is a base58 P2PKH address
    of the uncompressed public key.
    """

    if prv_key is None:
        prv_key = secp256k1.gen_prv_key()
    q = bytes_from_prv_key(prv_key)

    wif = wif_from_prv_key(q, network)
    pub_key = secp256k1.pub_key_from_prv_key(q)
    return wif, p2pkh(pub_key, network)


def sign(msg: String, prv_key: PrvKey, network: Optional[str] = None) -> Sig:
    "Generate address-based compact signature for the provided message."

    q = bytes_from_prv_key(prv_key)
    magic_msg = msg_hash(msg, network)
    key_id, compact_sig = secp256k1.sign_recoverable(magic_msg, q)

    r = int.from_bytes(compact_sig[:N_SIZE], "big", signed=False)
    s = int.from_bytes(compact_sig[N_SIZE:], "big", signed=False)
    # uncompressed P2PKH only: no 'compressed' bit in rf
    return Sig(key_id + 27, r, s)


def sign_b64(msg: String, prv_key: PrvKey, network: Optional[str] = None) -> str:
    "Return the base64-encoded address-based signature of the message."
    return sign(msg, prv_key, network).b64encode()


def recover_address(
    msg: String, sig: Union[Sig, String], network: Optional[str] = None
) -> str:
    "Return the P2PKH address of the public key recovered from the signature."

    if isinstance(sig, Sig):
        sig.assert_valid()
    else:
        sig = Sig.b64decode(sig)

    magic_msg = msg_hash(msg, network)
    if len(magic_msg) != N_SIZE:  # pragma: no cover
        raise MessageFailure(f"invalid message hash size: {len(magic_msg)}")
    compact_sig = sig.serialize(check_validity=False)[1:]
    pub_key = secp256k1.recover_pub_key(magic_msg, compact_sig, sig.key_id)
    return p2pkh(pub_key, network)


def assert_as_valid(
    msg: String, addr: String, sig: Union[Sig, String], network: Optional[str] = None
) -> None:
    """Raise the reason why the signature is not valid for message and address.

    AddressMismatch, carrying the recovered address,
    is raised for a well-formed signature of a different key;
    all other SignatureError subclasses are malformed input.
    """

    if isinstance(addr, bytes):
        addr = addr.decode("ascii")
    addr = addr.strip()

    # signature is valid only if the provided address is matched
    address = recover_address(msg, sig, network)
    if address != addr:
        raise AddressMismatch(address)


def verify(
    msg: String, addr: String, sig: Union[Sig, String], network: Optional[str] = None
) -> bool:
    "Verify address-based compact signature for the provided message."

    # all kind of Exceptions are catched because
    # verify must always return a bool
    try:
        assert_as_valid(msg, addr, sig, network)
    except Exception as e:  # pylint: disable=broad-except
        logger.debug("invalid signature: %s", e)
        return False
    else:
        return True
