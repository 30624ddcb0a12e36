#!/usr/bin/env python3

# Copyright (C) 2020-2022 The zerucrypt developers
#
# This file is part of zerucrypt. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of zerucrypt including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Signable records.

A signable record is a dataclass whose fields, but a few,
are signed with the message signing scheme of the bms module.
Fields are opted out of the signed payload with sign_field:

    @dataclass
    class Content(Signable):
        address: str
        modified: int
        signs: str = sign_field(SIGNATURE, default="")
        cache: bool = sign_field(SKIP, default=False)

Exactly one field must be the SIGNATURE holder.
The payload is the canonical JSON serialization of the record
without the SKIP and SIGNATURE fields:
sorted keys, ", " and ": " separators, UTF-8 text,
i.e. the ZeroNet content.json formatting.
"""

import dataclasses
import json
from typing import Any, Dict, Optional, Type, TypeVar

from dataclasses_json import DataClassJsonMixin

from zerucrypt import bms
from zerucrypt.alias import Signer, String
from zerucrypt.exceptions import ZerucryptTypeError
from zerucrypt.to_prv_key import PrvKey

SKIP = "skip"
SIGNATURE = "signature"

_METADATA_KEY = "zerucrypt"

_Signable = TypeVar("_Signable", bound="Signable")


def sign_field(role: str, **kwargs: Any) -> Any:
    "Return a dataclass field excluded from the signed payload."

    if role not in (SKIP, SIGNATURE):
        raise ZerucryptTypeError(f"invalid sign field role: {role!r}")
    metadata = dict(kwargs.pop("metadata", None) or {})
    metadata[_METADATA_KEY] = role
    return dataclasses.field(metadata=metadata, **kwargs)


def canonical_json(obj: Any) -> bytes:
    "Return the deterministic UTF-8 JSON serialization of obj."

    return json.dumps(
        obj, sort_keys=True, separators=(", ", ": "), ensure_ascii=False
    ).encode("utf-8")


def _role(field: dataclasses.Field) -> Optional[str]:
    return field.metadata.get(_METADATA_KEY)


class Signable(DataClassJsonMixin):
    "Mixin for dataclasses carrying their own message signature."

    @classmethod
    def signature_field(cls) -> str:
        "Return the name of the field holding the signature."

        if not dataclasses.is_dataclass(cls):
            raise ZerucryptTypeError(f"not a dataclass: {cls.__name__}")
        names = [f.name for f in dataclasses.fields(cls) if _role(f) == SIGNATURE]
        if len(names) != 1:
            err_msg = f"{cls.__name__} must have exactly one signature field, "
            err_msg += f"not {len(names)}"
            raise ZerucryptTypeError(err_msg)
        return names[0]

    def signable_dict(self) -> Dict[str, Any]:
        "Return the record as dict, without the fields excluded from signing."

        self.signature_field()
        dict_ = self.to_dict(encode_json=True)
        for field in dataclasses.fields(self):
            if _role(field):
                dict_.pop(field.name, None)
        return dict_

    def signable_bytes(self) -> bytes:
        "Return the canonical serialization of what gets signed."
        return canonical_json(self.signable_dict())

    def signature(self) -> str:
        "Return the signature held by the record."
        return getattr(self, self.signature_field())

    def sign_with(self: _Signable, signer: Signer) -> _Signable:
        "Return a copy of the record, signed by the provided signer."

        signature = signer(self.signable_bytes())
        return dataclasses.replace(self, **{self.signature_field(): signature})

    def sign(self: _Signable, prv_key: PrvKey, network: Optional[str] = None) -> _Signable:
        "Return a copy of the record, signed with the provided private key."
        return self.sign_with(lambda data: bms.sign_b64(data, prv_key, network))

    def assert_signed_by(self, addr: String, network: Optional[str] = None) -> None:
        "Raise the bms.assert_as_valid reason why the record is not signed by addr."
        bms.assert_as_valid(self.signable_bytes(), addr, self.signature(), network)

    def is_signed_by(self, addr: String, network: Optional[str] = None) -> bool:
        "Return True if the record is signed by the private key of addr."
        return bms.verify(self.signable_bytes(), addr, self.signature(), network)


def signable_type(cls: Type[_Signable]) -> Type[_Signable]:
    """Class decorator checking the signable record layout at definition time."""

    cls.signature_field()
    return cls
