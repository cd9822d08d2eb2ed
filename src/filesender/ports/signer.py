"""Signer port - interface for signing document content."""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..domain.models import Credential


class SignerPort(ABC):
    """Interface for signing."""

    @abstractmethod
    def sign(self, content: bytes, credential: "Credential") -> bytes:
        """Sign content with credential.

        Returns the signed payload. Raises SigningError on failure.
        """
        pass
