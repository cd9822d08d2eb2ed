"""Sender adapter writing payloads to a local outbox directory."""

import hashlib
import logging
from pathlib import Path

from ...ports.sender import SenderPort

logger = logging.getLogger(__name__)

SUFFIX = ".signed"


class OutboxSender(SenderPort):
    """Delivery channel using local filesystem."""

    def __init__(self, outbox_dir: Path) -> None:
        self.outbox_dir = outbox_dir

    def send(self, payload: bytes) -> bool:
        """Write payload as `<sha256 prefix>.signed`, never overwriting."""
        stem = hashlib.sha256(payload).hexdigest()[:16]

        try:
            self.outbox_dir.mkdir(parents=True, exist_ok=True)
            dest = self.outbox_dir / f"{stem}{SUFFIX}"

            # Exclusive create claims the name; concurrent senders move on to " (n)"
            counter = 1
            while True:
                try:
                    with open(dest, "xb") as f:
                        f.write(payload)
                    break
                except FileExistsError:
                    dest = self.outbox_dir / f"{stem} ({counter}){SUFFIX}"
                    counter += 1
        except OSError as e:
            logger.warning(f"Outbox write failed: {e}")
            return False

        logger.info(f"Delivered: {dest.name}")
        return True
