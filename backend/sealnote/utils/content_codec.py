"""Reversible storage encoding for note content.

Content is stored as base64 of its UTF-8 bytes. This is structural, not
cryptographic: anyone with store access can decode it. For ASCII text the
output matches a plain base64 of the characters.
"""
from __future__ import annotations

import base64
import binascii


class ContentDecodeError(ValueError):
    """Stored content is not valid base64 or not valid UTF-8."""


def encode_content(text: str) -> str:
    return base64.b64encode(text.encode("utf-8")).decode("ascii")


def decode_content(stored: str) -> str:
    if not isinstance(stored, str):
        raise ContentDecodeError("Stored content must be a string")
    try:
        raw = base64.b64decode(stored.encode("ascii"), validate=True)
        return raw.decode("utf-8")
    except (binascii.Error, UnicodeError) as exc:
        raise ContentDecodeError(str(exc)) from exc
