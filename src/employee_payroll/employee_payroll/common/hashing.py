from __future__ import annotations

import hashlib
import hmac

from ..core.constants import DEFAULT_HASH_ALGORITHM
from ..core.exceptions import HashingUnavailableError


class PasswordHasher:
    """One-way, deterministic password digest (hex encoded).

    The algorithm is resolved on construction, so a missing primitive fails
    at startup instead of on the first login.
    """

    def __init__(self, algorithm: str = DEFAULT_HASH_ALGORITHM):
        try:
            hashlib.new(algorithm)
        except (ValueError, TypeError) as e:
            raise HashingUnavailableError(f"Digest algorithm {algorithm!r} is not available") from e
        self.algorithm = algorithm

    def digest(self, plaintext: str) -> str:
        h = hashlib.new(self.algorithm)
        h.update(plaintext.encode("utf-8"))
        return h.hexdigest()

    def matches(self, plaintext: str, digest: str) -> bool:
        return hmac.compare_digest(self.digest(plaintext), digest)
