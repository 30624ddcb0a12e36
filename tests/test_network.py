#!/usr/bin/env python3

# Copyright (C) 2020-2022 The zerucrypt developers
#
# This file is part of zerucrypt. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of zerucrypt including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `zerucrypt.network` module."

import pytest

from zerucrypt.exceptions import ZerucryptValueError
from zerucrypt.network import NETWORKS, Network, get_network, network_from_key_value


def test_bad_network() -> None:

    with pytest.raises(ZerucryptValueError, match="invalid wif length: "):
        Network(wif="8000", p2pkh=b"\x00", msg_prefix="Bitcoin Signed Message:\n")

    with pytest.raises(ZerucryptValueError, match="empty msg_prefix"):
        Network(wif=b"\x80", p2pkh=b"\x00", msg_prefix="")

    with pytest.raises(ZerucryptValueError, match="wif and p2pkh share prefix: "):
        Network(wif=b"\x80", p2pkh=b"\x80", msg_prefix="Bitcoin Signed Message:\n")

    net = Network(wif=b"\x80", p2pkh=b"\x80", msg_prefix="", check_validity=False)
    with pytest.raises(ZerucryptValueError):
        net.to_dict()


def test_mainnet() -> None:
    net = NETWORKS["mainnet"]
    assert net.wif == b"\x80"
    assert net.p2pkh == b"\x00"
    assert net.magic_prefix == b"\x18Bitcoin Signed Message:\n"


def test_get_network() -> None:
    assert get_network() == NETWORKS["mainnet"]
    assert get_network(" MainNet ") == NETWORKS["mainnet"]
    assert get_network("testnet").wif == b"\xef"

    with pytest.raises(ZerucryptValueError, match="unknown network: "):
        get_network("MainNet2")


def test_network_from_key_value() -> None:
    assert network_from_key_value("p2pkh", b"\x00") == "mainnet"
    assert network_from_key_value("wif", b"\xef") == "testnet"
    assert network_from_key_value("wif", b"\x00") is None


def test_dict_round_trip() -> None:
    for net in NETWORKS.values():
        assert net == Network.from_dict(net.to_dict())
