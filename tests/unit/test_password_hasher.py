"""Tests for BcryptPasswordHasher (salted bcrypt over a SHA-256 pre-hash)."""

from sweem.domain.enums import PasswordVerificationResult
from sweem.infrastructure.security import BcryptPasswordHasher


class TestHash:
    def test_hash_is_not_plaintext(self, hasher: BcryptPasswordHasher) -> None:
        hashed = hasher.hash("password123")
        assert "password123" not in hashed
        assert hashed.startswith("$2")

    def test_same_password_hashes_differently(self, hasher: BcryptPasswordHasher) -> None:
        """Fresh salt per call."""
        assert hasher.hash("password123") != hasher.hash("password123")

    def test_rounds_are_encoded_in_hash(self) -> None:
        assert BcryptPasswordHasher(rounds=5).hash("pw").split("$")[2] == "05"


class TestVerify:
    def test_correct_password(self, hasher: BcryptPasswordHasher) -> None:
        hashed = hasher.hash("password123")
        assert hasher.verify(hashed, "password123") is PasswordVerificationResult.SUCCESS

    def test_wrong_password(self, hasher: BcryptPasswordHasher) -> None:
        hashed = hasher.hash("password123")
        assert hasher.verify(hashed, "password124") is PasswordVerificationResult.FAILED

    def test_passwords_longer_than_72_bytes_are_not_truncated(
        self, hasher: BcryptPasswordHasher
    ) -> None:
        base = "x" * 80
        hashed = hasher.hash(base + "a")
        assert hasher.verify(hashed, base + "b") is PasswordVerificationResult.FAILED

    def test_malformed_hash_fails(self, hasher: BcryptPasswordHasher) -> None:
        assert hasher.verify("not-a-bcrypt-hash", "password123") is PasswordVerificationResult.FAILED

    def test_verify_dummy_always_fails(self, hasher: BcryptPasswordHasher) -> None:
        assert hasher.verify_dummy("not-a-real-password") is PasswordVerificationResult.FAILED

    def test_dummy_hash_computed_once(self, hasher: BcryptPasswordHasher) -> None:
        assert hasher.dummy_hash is hasher.dummy_hash
