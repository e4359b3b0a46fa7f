import hashlib
import hmac


def legacy_password_hash(password: str) -> str:
    # The legacy membership database stores unsalted MD5 hex digests.
    return hashlib.md5(password.encode("utf-8")).hexdigest()  # noqa: S324


def verify_legacy_password(password: str, stored_hash: str | None) -> bool:
    if not stored_hash:
        return False
    return hmac.compare_digest(legacy_password_hash(password), stored_hash.strip().lower())
