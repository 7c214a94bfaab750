"""Infrastructure security services.

Exports:
    SessionTokenCodec: Encode and verify signed session tokens
    ALGORITHM: Signing algorithm used for session tokens
"""

from infrastructure.security.tokens import ALGORITHM, SessionTokenCodec

__all__ = [
    "ALGORITHM",
    "SessionTokenCodec",
]
