# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .password_hashing import WerkzeugPasswordHasher
from .tokens import JwtTokenCodec, decode_token, encode_token

__all__ = ["JwtTokenCodec", "WerkzeugPasswordHasher", "decode_token", "encode_token"]
