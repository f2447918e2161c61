"""Temporary password generation for new tenant administrators."""

from __future__ import annotations

import base64
import random
import secrets

MIN_PASSWORD_LENGTH = 8

UPPERCASE = "ABCDEFGHJKLMNOPQRSTUVWXYZ"
LOWERCASE = "abcdefghijkmnopqrstuvwxyz"
DIGITS = "0123456789"
SYMBOLS = "!@#$%^&*-=_+"

# One guaranteed character per class, written over positions 0..3.
_REQUIRED_CLASSES = (UPPERCASE, LOWERCASE, DIGITS, SYMBOLS)


class SecretGenerator:
    """Generates temporary passwords that satisfy identity-provider composition rules."""

    def __init__(self, shuffler: random.Random | None = None) -> None:
        self._shuffler = shuffler or random.Random()

    def generate(self, length: int = MIN_PASSWORD_LENGTH) -> str:
        """Generate a password with guaranteed complexity.

        Base characters come from a cryptographically strong source; the
        first four positions are then overwritten with one uppercase, one
        lowercase, one digit and one symbol, and the result is shuffled so
        the guaranteed characters do not sit at predictable positions.
        Lengths below 8 are clamped to 8.
        """
        length = max(length, MIN_PASSWORD_LENGTH)
        token = base64.b64encode(secrets.token_bytes(length)).decode("ascii")
        chars = list(token[:length])
        for position, alphabet in enumerate(_REQUIRED_CLASSES):
            chars[position] = secrets.choice(alphabet)
        self._shuffler.shuffle(chars)
        return "".join(chars)
