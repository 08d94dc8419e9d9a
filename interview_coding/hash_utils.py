# Interview Coding
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""Hash utilities.

The project uses MD5 hashes only to derive stable speaker ids from the speaker
keys of structured transcripts. It is not used for cryptographic security.

Python's built-in `hash()` is salted per process, so it cannot be used when the
same file must yield the same ids on every run.
"""

import hashlib


def _md5():
    # Some environments run in FIPS mode. Python's hashlib supports
    # `usedforsecurity=False` for legacy hashes on OpenSSL-backed builds.
    try:
        return hashlib.md5(usedforsecurity=False)  # type: ignore[call-arg]
    except TypeError:
        return hashlib.md5()


def md5_bytes(data: bytes) -> bytes:
    """Compute the raw MD5 digest for in-memory bytes."""

    hasher = _md5()
    hasher.update(data)
    return hasher.digest()


def stable_key_id(key: str) -> int:
    """Derive a deterministic unsigned 64-bit id from a string key.

    Args:
        key:
            Native key from the source document (e.g. a speaker id).

    Returns:
        The first eight digest bytes read as a big-endian integer.

    Note:
        Distinct keys may collide. With 64 bits this is unlikely for the
        handful of speakers in one interview, but it is not prevented.
    """

    digest = md5_bytes(key.encode("utf-8"))
    return int.from_bytes(digest[:8], "big")
