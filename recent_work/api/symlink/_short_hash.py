"""Short path hash used to disambiguate symlink names."""

import hashlib


def _short_hash(value: str) -> str:
    """First 2 bytes of the MD5 digest of ``value`` as 4 lowercase hex digits.

    Hashes the path string, never file content.
    """
    return hashlib.md5(value.encode("utf-8")).hexdigest()[:4]
