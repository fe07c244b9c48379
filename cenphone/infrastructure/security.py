"""
Password hashing.

Hashes use passlib's PBKDF2-SHA256 modular crypt format
(``$pbkdf2-sha256$<rounds>$<salt>$<checksum>``), so the round count can be
raised later without invalidating stored hashes.
"""
import logging

from passlib.hash import pbkdf2_sha256

logger = logging.getLogger(__name__)

DEFAULT_ITERATIONS = 390_000


class PasswordHasher:
    """Salted PBKDF2-SHA256 hasher. Plaintext passwords are never stored."""

    def __init__(self, iterations: int = DEFAULT_ITERATIONS):
        if iterations < 1:
            raise ValueError(f"iterations must be positive: {iterations}")
        self.iterations = iterations
        self._scheme = pbkdf2_sha256.using(rounds=iterations)

    def hash(self, password: str) -> str:
        return self._scheme.hash(password)

    def verify(self, password: str, encoded: str) -> bool:
        """Check ``password`` against a stored hash. Unrecognised hashes never verify."""
        if not encoded or not pbkdf2_sha256.identify(encoded):
            return False
        try:
            return pbkdf2_sha256.verify(password, encoded)
        except ValueError:
            logger.warning("Stored password hash is malformed")
            return False
