from __future__ import annotations

import bcrypt

from .errors import InvalidInputError

# bcrypt only looks at the first 72 bytes of the secret
MAX_SECRET_BYTES = 72


class PasswordHasher:
    """Opaque hashing capability used by the credential store."""

    def __init__(self, rounds: int = 12) -> None:
        self._rounds = rounds

    def hash(self, secret: str) -> str:
        encoded = secret.encode("utf-8")
        if len(encoded) > MAX_SECRET_BYTES:
            raise InvalidInputError("Senha muito longa.")
        return bcrypt.hashpw(encoded, bcrypt.gensalt(rounds=self._rounds)).decode("utf-8")

    def verify(self, secret: str, digest: str) -> bool:
        encoded = secret.encode("utf-8")
        if len(encoded) > MAX_SECRET_BYTES:
            return False
        try:
            return bcrypt.checkpw(encoded, digest.encode("utf-8"))
        except ValueError:
            # malformed digest stored for the user
            return False
