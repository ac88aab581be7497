"""
Exceptions raised by the shortener core.

Expected outcomes (duplicate ids, duplicate URLs, unknown ids) are returned as
values, not raised. Only failures the caller cannot recover from end up here,
and the API layer maps each class to an HTTP status code.
"""

from typing import Optional


class ShortenerError(Exception):
    """Base class for all shortener errors"""


class InvalidArgumentError(ShortenerError, ValueError):
    """A required value was empty or missing"""


class ShortIdGenerationError(ShortenerError):
    """No usable short id could be produced; a server fault, not a client one"""

    def __init__(self, attempts: int, reason: Optional[str] = None):
        self.attempts = attempts
        super().__init__(
            reason or f"Could not generate unique short id after {attempts} attempts"
        )
