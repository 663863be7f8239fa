"""Tests for password hashing."""

from session_auth.auth.passwords import hash_password, verify_password


def test_hash_uses_configured_cost_factor():
    """Hashes are bcrypt with cost factor 6 by default."""
    hashed = hash_password("1234")

    assert hashed != "1234"
    assert hashed.startswith("$2b$06$")


def test_hash_is_salted():
    """The same password hashes differently each time."""
    assert hash_password("1234") != hash_password("1234")


def test_explicit_rounds_override_settings():
    """Callers can request a different cost factor."""
    assert hash_password("1234", rounds=4).startswith("$2b$04$")


def test_verify_password_matches_only_original():
    """Verification accepts the original password and rejects others."""
    hashed = hash_password("1234")

    assert verify_password("1234", hashed) is True
    assert verify_password("wrong", hashed) is False
    assert verify_password("", hashed) is False


def test_verify_password_rejects_malformed_hash():
    """A stored value that is not a bcrypt hash never verifies."""
    assert verify_password("1234", "plaintext") is False


def test_long_and_unicode_passwords():
    """Passwords past bcrypt's 72-byte limit and non-ASCII input still work."""
    long_password = "x" * 100
    assert verify_password(long_password, hash_password(long_password)) is True

    unicode_password = "pässwörd"
    assert verify_password(unicode_password, hash_password(unicode_password)) is True
