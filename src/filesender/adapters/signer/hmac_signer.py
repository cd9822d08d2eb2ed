"""Signer adapter using HMAC-SHA256."""

import base64
import hashlib
import hmac
import json
import logging

from ...domain.exceptions import SigningError
from ...domain.models import Credential
from ...ports.signer import SignerPort

logger = logging.getLogger(__name__)

ALGORITHM = "HMAC-SHA256"


class HmacSigner(SignerPort):
    """Wraps content in a JSON envelope carrying an HMAC-SHA256 signature."""

    def sign(self, content: bytes, credential: Credential) -> bytes:
        if not credential.key:
            raise SigningError(f"Credential for {credential.subject} has no key")

        signature = hmac.new(credential.key, content, hashlib.sha256).hexdigest()
        envelope = {
            "subject": credential.subject,
            "algorithm": ALGORITHM,
            "signature": signature,
            "content": base64.b64encode(content).decode("ascii"),
        }
        logger.debug(f"Signed {len(content)} bytes for {credential.subject}")
        return json.dumps(envelope).encode("utf-8")


def verify(payload: bytes, credential: Credential) -> bool:
    """Check an envelope produced by HmacSigner against a credential."""
    try:
        envelope = json.loads(payload)
        content = base64.b64decode(envelope["content"])
    except (ValueError, KeyError, TypeError):
        return False
    expected = hmac.new(credential.key, content, hashlib.sha256).hexdigest()
    return hmac.compare_digest(expected, str(envelope.get("signature", "")))
