import re

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

# http(s) scheme, dotted host ending in a 2-6 letter TLD, optional port and path
URL_PATTERN = re.compile(
    r"^(https?)://([a-zA-Z0-9-]+\.)+[a-zA-Z]{2,6}(:\d+)?"
    r"(/[a-zA-Z0-9\-._~:/?#\[\]@!$&'()*+,;%=]*)?$"
)


class CamelModel(BaseModel):
    """Serializes snake_case fields as camelCase on the wire"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ShortenUrlRequest(CamelModel):
    """
    Body of POST /api/url/shorten.

    The URL is kept as a plain string rather than HttpUrl: HttpUrl normalizes
    (e.g. appends a trailing slash), and the shortener must hand back exactly
    what it was given.
    """
    original_url: str = Field(..., description="The original URL to be shortened")

    @field_validator("original_url")
    @classmethod
    def validate_original_url(cls, value: str) -> str:
        # Matched as sent: padded input is rejected, never rewritten
        if not value:
            raise ValueError("Original URL cannot be empty.")
        if not URL_PATTERN.match(value):
            raise ValueError("Invalid URL format.")
        return value


class ShortenUrlResponse(CamelModel):
    short_url: str
    short_id: str


class ResolveUrlResponse(CamelModel):
    original_url: str


class ErrorResponse(CamelModel):
    """Body of every non-2xx response"""
    message: str
    status_code: int
    error: str
