"""Sender port - interface for delivering signed payloads."""

from abc import ABC, abstractmethod


class SenderPort(ABC):
    """Interface for a delivery channel."""

    @abstractmethod
    def send(self, payload: bytes) -> bool:
        """Deliver a signed payload.

        Returns False if the payload was not delivered.
        """
        pass
