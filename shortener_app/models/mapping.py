from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict


class UrlMapping(BaseModel):
    """
    Canonical pairing of a short id and the URL it stands for.

    Owned by the mapping store. Created once on the first successful shorten
    of a URL and never updated or deleted afterwards.
    """
    short_id: str
    original_url: str

    model_config = ConfigDict(frozen=True)


class AddOutcome(str, Enum):
    """Result kinds of MappingStore.add"""
    ADDED = "added"
    DUPLICATE_SHORT_ID = "duplicate_short_id"
    DUPLICATE_URL = "duplicate_url"
    INVALID_ARGUMENT = "invalid_argument"


class AddResult(BaseModel):
    """
    Outcome of an add attempt.

    ``mapping`` is the mapping that ended up canonical for the request:
    the new one on ADDED, the existing one on either duplicate outcome,
    None when the arguments were rejected.
    """
    outcome: AddOutcome
    mapping: Optional[UrlMapping] = None

    model_config = ConfigDict(frozen=True)

    @property
    def added(self) -> bool:
        return self.outcome is AddOutcome.ADDED

    @property
    def short_id(self) -> Optional[str]:
        return self.mapping.short_id if self.mapping else None
