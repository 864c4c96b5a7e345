"""
Short code generation strategies for URL shortener.
Uses Strategy Pattern to allow different generation algorithms.
"""

import secrets
import string
from abc import ABC, abstractmethod


class ShortCodeStrategy(ABC):
    """Abstract base class for short code generation strategies"""

    @abstractmethod
    def generate(self) -> str:
        """
        Generate a short code.

        Uniqueness is not guaranteed here: the link service checks the
        store before inserting, and the unique constraint catches races.

        Returns:
            A URL-safe short code string
        """
        pass


class HexShortCodeStrategy(ShortCodeStrategy):
    """
    Default strategy: random bytes rendered as lowercase hex.

    3 bytes give a 6 character code (16^6 ~ 16.7M codes).
    """

    def __init__(self, num_bytes: int = 3):
        if num_bytes < 1:
            raise ValueError(f"num_bytes must be positive, got {num_bytes}")
        self.num_bytes = num_bytes

    @property
    def length(self) -> int:
        return self.num_bytes * 2

    def generate(self) -> str:
        return secrets.token_hex(self.num_bytes)


class RandomShortCodeStrategy(ShortCodeStrategy):
    """
    Random alphanumeric strategy.

    Pros: Denser than hex (62^7 ~ 3.5T codes at the default length)
    Cons: Mixed case codes are harder to read out loud
    """

    def __init__(self, length: int = 7):
        if length < 1:
            raise ValueError(f"length must be positive, got {length}")
        self.length = length
        self.characters = string.ascii_letters + string.digits

    def generate(self) -> str:
        return ''.join(secrets.choice(self.characters) for _ in range(self.length))
