"""Ports - interfaces for external dependencies."""

from .clock import ClockPort
from .recognizer import RecognizerPort
from .sender import SenderPort
from .signer import SignerPort

__all__ = ["ClockPort", "RecognizerPort", "SenderPort", "SignerPort"]
