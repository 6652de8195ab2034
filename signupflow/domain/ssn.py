"""
SSN protection - Keyed digest stored in place of the raw SSN.

The digest is HMAC-SHA256 over the raw value, hex encoded: deterministic
for a given key, unrelated across keys, always 64 characters long.

The key is always passed in explicitly. The development fallback secret
lives in configuration (see signupflow.config.settings), where the
application warns about it at startup.
"""

import hashlib
import hmac
from dataclasses import dataclass


def protect_ssn(raw_ssn: str, key: str) -> str:
    """
    Compute the storage digest of a raw SSN.

    No validation of the SSN shape happens here; the workflow validates
    the field before any collaborator sees it.

    Args:
        raw_ssn: SSN as entered
        key: Deployment secret

    Returns:
        64-character lowercase hex digest
    """
    return hmac.new(key.encode(), raw_ssn.encode(), hashlib.sha256).hexdigest()


@dataclass(frozen=True)
class SsnProtector:
    """SSN protection bound to one deployment secret."""

    key: str

    def protect(self, raw_ssn: str) -> str:
        return protect_ssn(raw_ssn, self.key)

    def matches(self, raw_ssn: str, digest: str) -> bool:
        """Check a raw SSN against a stored digest in constant time."""
        return hmac.compare_digest(self.protect(raw_ssn), digest)

    def __repr__(self) -> str:
        return "SsnProtector(key=***)"
