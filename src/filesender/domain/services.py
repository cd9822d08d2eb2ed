"""Domain services - orchestrate business logic."""

import logging
from collections.abc import Iterable, Sequence
from concurrent.futures import ThreadPoolExecutor

from ..ports.clock import ClockPort
from ..ports.recognizer import RecognizerPort
from ..ports.sender import SenderPort
from ..ports.signer import SignerPort
from .exceptions import SigningError
from .models import (
    BatchResult,
    Credential,
    Document,
    RawFile,
    SkippedFile,
    SkipReason,
)
from .validation import (
    ACCEPTED_FORMATS,
    FRESHNESS_MONTHS,
    check_format,
    check_freshness,
)

logger = logging.getLogger(__name__)


class FileSender:
    """Runs each file through recognize -> validate -> sign -> deliver."""

    def __init__(
        self,
        recognizer: RecognizerPort,
        signer: SignerPort,
        sender: SenderPort,
        clock: ClockPort,
        accepted_formats: Iterable[str] = ACCEPTED_FORMATS,
        freshness_months: int = FRESHNESS_MONTHS,
        max_workers: int = 1,
    ) -> None:
        self.recognizer = recognizer
        self.signer = signer
        self.sender = sender
        self.clock = clock
        self.accepted_formats = frozenset(accepted_formats)
        self.freshness_months = freshness_months
        self.max_workers = max_workers

    def send_files(
        self, files: Sequence[RawFile], credential: Credential
    ) -> BatchResult:
        """Send a batch of files, collecting the ones that were skipped.

        Per-file failures never abort the batch. Raises ValueError only
        for a missing batch or credential.
        """
        if files is None:
            raise ValueError("files must not be None")
        if credential is None:
            raise ValueError("credential must not be None")

        files = list(files)
        logger.info(f"Sending {len(files)} files as {credential.subject}")

        if self.max_workers > 1 and len(files) > 1:
            with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
                reasons = list(
                    executor.map(lambda f: self._try_send(f, credential), files)
                )
        else:
            reasons = [self._try_send(f, credential) for f in files]

        result = BatchResult(
            total=len(files), sent=sum(reason is None for reason in reasons)
        )
        seen: set[int] = set()
        for file, reason in zip(files, reasons):
            if reason is None or id(file) in seen:
                continue
            seen.add(id(file))
            result.skipped.append(SkippedFile(file=file, reason=reason))

        logger.info(
            f"Batch complete: {result.sent_count} sent, {len(result.skipped)} skipped"
        )
        return result

    def check_file(self, file: RawFile) -> SkipReason | None:
        """Recognize and validate a file without signing or sending it."""
        reason, _ = self.inspect_file(file)
        return reason

    def inspect_file(self, file: RawFile) -> tuple[SkipReason | None, Document | None]:
        """Like check_file, also returning the recognized document (if any)."""
        return self._recognize_and_validate(file)

    def _try_send(self, file: RawFile, credential: Credential) -> SkipReason | None:
        reason, document = self._recognize_and_validate(file)
        if reason is not None or document is None:
            return reason

        try:
            payload = self.signer.sign(document.content, credential)
        except SigningError as e:
            logger.warning(f"Skipped {file.name}: signing failed ({e})")
            return SkipReason.SIGNING_FAILED

        if not self.sender.send(payload):
            logger.info(f"Skipped {file.name}: delivery rejected")
            return SkipReason.DELIVERY_REJECTED

        logger.debug(f"Sent: {file.name}")
        return None

    def _recognize_and_validate(
        self, file: RawFile
    ) -> tuple[SkipReason | None, Document | None]:
        document = self.recognizer.recognize(file)
        if document is None:
            logger.info(f"Skipped {file.name}: not recognized")
            return SkipReason.UNRECOGNIZED, None

        if not check_format(document, self.accepted_formats):
            logger.info(f"Skipped {file.name}: unsupported format {document.format!r}")
            return SkipReason.UNSUPPORTED_FORMAT, document

        if not check_freshness(document, self.clock.now(), self.freshness_months):
            logger.info(f"Skipped {file.name}: created {document.created.isoformat()}")
            return SkipReason.STALE, document

        return None, document
