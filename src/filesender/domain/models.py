"""Domain models."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum


@dataclass(frozen=True)
class RawFile:
    """Unprocessed named payload submitted for sending."""

    name: str
    content: bytes


@dataclass(frozen=True)
class Document:
    """Recognized document with format tag and creation time."""

    name: str
    content: bytes
    created: datetime
    format: str


@dataclass(frozen=True)
class Credential:
    """Signing authority, constant for one batch."""

    subject: str
    key: bytes = field(repr=False)


class SkipReason(str, Enum):
    """Why a file was not sent."""

    UNRECOGNIZED = "unrecognized"
    UNSUPPORTED_FORMAT = "unsupported_format"
    STALE = "stale"
    SIGNING_FAILED = "signing_failed"
    DELIVERY_REJECTED = "delivery_rejected"


@dataclass(frozen=True)
class SkippedFile:
    file: RawFile
    reason: SkipReason


@dataclass
class BatchResult:
    """Outcome of one batch: the skipped subset, in input order."""

    total: int = 0
    sent: int = 0
    skipped: list[SkippedFile] = field(default_factory=list)

    @property
    def skipped_files(self) -> list[RawFile]:
        return [s.file for s in self.skipped]

    @property
    def sent_count(self) -> int:
        return self.sent

    @property
    def success(self) -> bool:
        return not self.skipped
