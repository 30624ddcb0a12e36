#!/usr/bin/env python3

# Copyright (C) 2020-2022 The zerucrypt developers
#
# This file is part of zerucrypt. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of zerucrypt including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Exception classes.

The first three are only meant to dicriminate between Exceptions
being raised by zerucrypt from those raised by other codebase.

Users are usually better off just dealing with the regular
ValueError, TypeError, and RuntimeError
from which the zerucrypt versions are derived.

The SignatureError subclasses tell apart why signing or
verifying a message failed:
AddressMismatch is the expected outcome of a forged or mismatched
signature, all the others signal malformed input.
"""


class ZerucryptValueError(ValueError):
    pass


class ZerucryptTypeError(TypeError):
    pass


class ZerucryptRuntimeError(RuntimeError):
    pass


class SignatureError(ZerucryptValueError):
    pass


class DecodeSignatureFailure(SignatureError):
    pass


class RecoveryIdFailure(SignatureError):
    pass


class RecoverableSignatureFailure(SignatureError):
    pass


class MessageFailure(SignatureError):
    pass


class PublicKeyFailure(SignatureError):
    pass


class PrivateKeyFailure(SignatureError):
    pass


class AddressMismatch(SignatureError):
    "The signature is valid, but for a different address."

    def __init__(self, address: str) -> None:
        super().__init__(f"address mismatch, recovered address: {address}")
        self.address = address
