"""Password hashing (bcrypt with SHA-256 pre-hash).

Bcrypt truncates inputs at 72 bytes; pre-hashing with SHA-256 yields a fixed-length
input so long passwords are not silently truncated. bcrypt.checkpw compares
digests in constant time. The work factor (log2 rounds) comes from
BCRYPT_ROUNDS; hashes keep their own cost, so changing it only affects new hashes.
"""

import base64
import hashlib
from functools import cached_property

import bcrypt

from sweem.domain.enums import PasswordVerificationResult

DEFAULT_ROUNDS = 12


def _prehash(password: str) -> bytes:
    """SHA-256 pre-hash to avoid bcrypt's 72-byte truncation."""
    return base64.b64encode(hashlib.sha256(password.encode("utf-8")).digest())


class BcryptPasswordHasher:
    """bcrypt hasher. Calls are CPU-bound; async callers use asyncio.to_thread."""

    def __init__(self, rounds: int = DEFAULT_ROUNDS) -> None:
        self.rounds = rounds

    def hash(self, plaintext: str) -> str:
        """Return bcrypt hash of plaintext (SHA-256 pre-hashed, fresh salt)."""
        salt = bcrypt.gensalt(rounds=self.rounds)
        return bcrypt.hashpw(_prehash(plaintext), salt).decode("utf-8")

    def verify(self, hashed: str, plaintext: str) -> PasswordVerificationResult:
        """Return SUCCESS if plaintext matches hashed; FAILED otherwise or if hashed is malformed."""
        try:
            matched = bcrypt.checkpw(_prehash(plaintext), hashed.encode("utf-8"))
        except (ValueError, TypeError):
            return PasswordVerificationResult.FAILED
        if matched:
            return PasswordVerificationResult.SUCCESS
        return PasswordVerificationResult.FAILED

    @cached_property
    def dummy_hash(self) -> str:
        """Valid hash at this hasher's cost, computed on first use."""
        return self.hash("not-a-real-password")

    def verify_dummy(self, plaintext: str) -> PasswordVerificationResult:
        """Run a full verification against dummy_hash (timing equalization for unknown logins)."""
        self.verify(self.dummy_hash, plaintext)
        return PasswordVerificationResult.FAILED
