"""Recognizer port - interface for turning raw files into documents."""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..domain.models import Document, RawFile


class RecognizerPort(ABC):
    """Interface for document recognition."""

    @abstractmethod
    def recognize(self, file: "RawFile") -> "Document | None":
        """Recognize a raw file.

        Returns None if the file is not a recognizable document.
        """
        pass
