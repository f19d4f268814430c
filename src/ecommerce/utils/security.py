import hashlib


def hash_md5(value: str | None) -> str | None:
    """
    Lower-case hex MD5 digest of a credential.

    Stored digests in the users table are MD5, so the same function has to be used
    for registration, admin-created accounts and any later comparison.
    """
    if value is None:
        return None
    return hashlib.md5(value.encode("utf-8")).hexdigest()
