"""Security helpers (hashing and verification)."""

from __future__ import annotations

import secrets

from argon2 import PasswordHasher, exceptions as argon_exc

_ph = PasswordHasher()
_PREFIX = "argon2$"


def hash_password(password: str) -> str:
    """Create a salted Argon2 hash with a prefix for detection."""
    hashed = _ph.hash(password)
    return f"{_PREFIX}{hashed}"


def verify_password(password: str, stored_hash: str | None) -> bool:
    stored = stored_hash or ""
    if stored.startswith(_PREFIX):
        hashed = stored[len(_PREFIX) :]
        try:
            return _ph.verify(hashed, password)
        except (argon_exc.VerifyMismatchError, argon_exc.VerificationError, argon_exc.InvalidHashError):
            return False
    # Rows imported from the plaintext users table keep their credential verbatim.
    if not stored:
        return False
    return secrets.compare_digest(stored.encode("utf-8"), (password or "").encode("utf-8"))


# Checked against when the username is unknown, so a rejection costs one
# Argon2 verify whether or not the account exists.
_UNKNOWN_USER_HASH = hash_password(secrets.token_urlsafe(16))


def reject_unknown_user(password: str) -> bool:
    """Spend the same work as a real verify; always False."""
    verify_password(password, _UNKNOWN_USER_HASH)
    return False
