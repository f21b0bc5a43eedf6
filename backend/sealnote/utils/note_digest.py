"""Password-binding digest for notes.

A note's digest is SHA-256 over ``password + "|" + plaintext_content``,
base64-encoded. It authenticates the password and pins it to one exact
content value: changing either the password or the content without
recomputing the digest makes verification fail.

Provides two functions used by the note lifecycle:
- derive_digest(password: str, plaintext_content: str) -> str
- verify_digest(password: str, plaintext_content: str, expected_digest: str) -> bool
"""
from __future__ import annotations

import base64
import hashlib
import hmac

SEPARATOR = "|"


def derive_digest(password: str, plaintext_content: str) -> str:
    """Return the base64 SHA-256 digest binding `password` to `plaintext_content`."""
    if password is None or plaintext_content is None:
        raise ValueError("Password and content must not be None")
    data = (password + SEPARATOR + plaintext_content).encode("utf-8")
    return base64.b64encode(hashlib.sha256(data).digest()).decode("ascii")


def verify_digest(password: str, plaintext_content: str, expected_digest: str) -> bool:
    """Check `password` against `expected_digest` for the given plaintext.

    Returns True on an exact match, False otherwise. Never raises.
    """
    if password is None or plaintext_content is None or not isinstance(expected_digest, str):
        return False
    try:
        actual = derive_digest(password, plaintext_content).encode("utf-8")
        expected = expected_digest.encode("utf-8")
    except UnicodeError:
        # lone surrogates cannot be encoded, so they cannot match
        return False
    # constant-time compare
    return hmac.compare_digest(actual, expected)
