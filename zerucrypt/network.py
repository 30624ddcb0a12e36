#!/usr/bin/env python3

# Copyright (C) 2020-2022 The zerucrypt developers
#
# This file is part of zerucrypt. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of zerucrypt including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Network constants and associated functions.

Each network is loaded from a json file in the _data folder.
"""

import json
from dataclasses import dataclass
from os import path
from typing import Any, Dict, List, Mapping, Optional, Tuple, Type, TypeVar

from zerucrypt import var_int
from zerucrypt.alias import Octets
from zerucrypt.exceptions import ZerucryptValueError
from zerucrypt.utils import bytes_from_octets

_KEY_SIZE: List[Tuple[str, int]] = [
    ("wif", 1),
    ("p2pkh", 1),
]

_Network = TypeVar("_Network", bound="Network")


@dataclass(frozen=True)
class Network:

    # base58 wif starts with '5' on mainnet
    wif: bytes

    # base58 address starts with '1' on mainnet
    p2pkh: bytes

    # the magic text prepended to any message before signing;
    # it is serialized with its own var_int length prefix
    msg_prefix: str

    def __init__(
        self,
        wif: Octets,
        p2pkh: Octets,
        msg_prefix: str,
        check_validity: bool = True,
    ) -> None:

        object.__setattr__(self, "wif", bytes_from_octets(wif))
        object.__setattr__(self, "p2pkh", bytes_from_octets(p2pkh))
        object.__setattr__(self, "msg_prefix", msg_prefix)

        if check_validity:
            self.assert_valid()

    def to_dict(self, check_validity: bool = True) -> Dict[str, str]:

        if check_validity:
            self.assert_valid()

        return {
            "wif": self.wif.hex(),
            "p2pkh": self.p2pkh.hex(),
            "msg_prefix": self.msg_prefix,
        }

    @classmethod
    def from_dict(
        cls: Type[_Network], dict_: Mapping[str, Any], check_validity: bool = True
    ) -> _Network:

        return cls(
            dict_["wif"],
            dict_["p2pkh"],
            dict_["msg_prefix"],
            check_validity,
        )

    def assert_valid(self) -> None:

        for key, size in _KEY_SIZE:
            value = bytes(getattr(self, key))
            if len(value) != size:
                err_msg = f"invalid {key} length: "
                err_msg += f"{len(value)} bytes"
                err_msg += f" instead of {size}"
                raise ZerucryptValueError(err_msg)

        if not self.msg_prefix:
            raise ZerucryptValueError("empty msg_prefix")
        if self.wif == self.p2pkh:
            raise ZerucryptValueError(f"wif and p2pkh share prefix: {self.wif!r}")

    @property
    def magic_prefix(self) -> bytes:
        "The message prefix serialized as [var_int length][prefix]."
        prefix = self.msg_prefix.encode("utf-8")
        return var_int.serialize(len(prefix)) + prefix


NETWORKS: Dict[str, Network] = {}
datadir = path.join(path.dirname(__file__), "_data")
for net in ("mainnet", "testnet"):
    filename = path.join(datadir, net + ".json")
    with open(filename, "r", encoding="ascii") as f:
        NETWORKS[net] = Network.from_dict(json.load(f))


def network_from_key_value(key: str, prefix: bytes) -> Optional[str]:
    """Return network string from (key, value) pair.

    E.g. network_from_key_value("p2pkh", b"\\x00") is "mainnet".
    """
    for network in NETWORKS:
        if getattr(NETWORKS[network], key) == prefix:
            return network
    return None


def get_network(network: Optional[str] = None) -> Network:
    "Return the Network for a (case and blank insensitive) name, mainnet if None."

    name = "mainnet" if network is None else network.strip().lower()
    try:
        return NETWORKS[name]
    except KeyError:
        raise ZerucryptValueError(f"unknown network: {network!r}") from None
