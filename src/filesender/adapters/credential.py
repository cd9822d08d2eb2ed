"""Credential loading from a YAML key file."""

import logging
from pathlib import Path

import yaml

from ..domain.exceptions import CredentialError
from ..domain.models import Credential

logger = logging.getLogger(__name__)


def load_credential(path: Path) -> Credential:
    """Load a credential from YAML with `subject` and hex-encoded `key`.

    Raises:
        CredentialError: if the file is missing or malformed.
    """
    if not path.exists():
        raise CredentialError(f"Credential file not found: {path}")

    try:
        data = yaml.safe_load(path.read_text())
    except yaml.YAMLError as e:
        raise CredentialError(f"Invalid credential file {path}: {e}") from e

    if not isinstance(data, dict):
        raise CredentialError(f"Invalid credential file {path}: expected a mapping")

    subject = data.get("subject")
    key = data.get("key")
    if not subject or not key:
        raise CredentialError(f"Credential file {path} needs 'subject' and 'key'")

    try:
        key_bytes = bytes.fromhex(str(key))
    except ValueError as e:
        raise CredentialError(f"Credential key in {path} is not hex") from e

    logger.debug(f"Loaded credential for {subject}")
    return Credential(subject=str(subject), key=key_bytes)
