"""Password hashing for account credentials.

Uses bcrypt with a fixed work factor. bcrypt embeds the salt and cost in
the hash string, so verification needs nothing but the stored hash.
"""

from __future__ import annotations

import bcrypt

# Cost parameter (log2 rounds). Fixed for every hash this service creates.
WORK_FACTOR = 12

# bcrypt ignores input beyond this many bytes; newer releases reject it.
BCRYPT_MAX_BYTES = 72


def _encode(plaintext: str) -> bytes:
    return plaintext.encode("utf-8")[:BCRYPT_MAX_BYTES]


class BcryptPasswordHasher:
    """PasswordHasher implementation backed by bcrypt."""

    def hash(self, plaintext: str) -> str:
        """Hash a password using bcrypt.

        A fresh random salt is generated per call, so hashing the same
        password twice yields different strings.

        Args:
            plaintext: The password to hash

        Returns:
            The bcrypt hash as a string
        """
        return bcrypt.hashpw(_encode(plaintext), bcrypt.gensalt(rounds=WORK_FACTOR)).decode()

    def verify(self, plaintext: str, hashed: str) -> bool:
        """Verify a password against its hash using constant-time comparison.

        Args:
            plaintext: The password to verify
            hashed: The bcrypt hash to verify against

        Returns:
            True if the password matches the hash, False otherwise
        """
        try:
            return bcrypt.checkpw(_encode(plaintext), hashed.encode())
        except ValueError:
            # Malformed or non-bcrypt hash
            return False
