"""Tests for password hashing."""

from security.passwords import hash_password, verify_password


def test_hash_is_not_plaintext_and_verifies():
    hashed = hash_password("correct horse")

    assert hashed != "correct horse"
    assert verify_password("correct horse", hashed)
    assert not verify_password("wrong horse", hashed)


def test_hashes_are_salted():
    assert hash_password("same") != hash_password("same")


def test_empty_hash_never_verifies():
    assert not verify_password("anything", "")
