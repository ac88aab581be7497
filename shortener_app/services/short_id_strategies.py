"""
Short id generation strategies for URL shortener.
Uses Strategy Pattern to allow different generation algorithms.

Strategies only produce candidates. They never look at the mapping store,
so a candidate may already be taken; the service retries in that case.
"""

import base64
import secrets
import string
import uuid
from abc import ABC, abstractmethod


class ShortIdStrategy(ABC):
    """Abstract base class for short id generation strategies"""

    @abstractmethod
    def generate(self) -> str:
        """
        Generate a candidate short id.

        Returns:
            A fixed-length, URL-safe string
        """
        pass


class UuidShortIdStrategy(ShortIdStrategy):
    """
    Encodes a random 128-bit UUID4 as URL-safe base64 and keeps a prefix.

    Alphabet: A-Z a-z 0-9 - _ (64 symbols, 6 bits per character).
    The default 8 characters give 48 random bits.

    Pros: High entropy, no shared state
    Cons: Not collision-free, ids are not sequential
    """

    MAX_LENGTH = 22  # 128 bits / 6 bits per char, padding stripped

    def __init__(self, length: int = 8):
        if not 1 <= length <= self.MAX_LENGTH:
            raise ValueError(
                f"Short id length must be between 1 and {self.MAX_LENGTH}, got {length}"
            )
        self.length = length

    def generate(self) -> str:
        encoded = base64.urlsafe_b64encode(uuid.uuid4().bytes).decode("ascii")
        return encoded[:self.length]


class RandomShortIdStrategy(ShortIdStrategy):
    """
    Draws characters from A-Z a-z 0-9 with the secrets CSPRNG.

    Pros: Alphanumeric only, any length
    Cons: Collision risk grows with volume
    """

    CHARACTERS = string.ascii_letters + string.digits

    def __init__(self, length: int = 8):
        if length < 1:
            raise ValueError(f"Short id length must be positive, got {length}")
        self.length = length

    def generate(self) -> str:
        return ''.join(secrets.choice(self.CHARACTERS) for _ in range(self.length))
