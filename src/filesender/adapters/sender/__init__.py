"""Sender adapters."""

from ...config import DeliveryChannel, DeliveryConfig
from ...ports.sender import SenderPort
from .http import HttpSender
from .outbox import OutboxSender

__all__ = ["HttpSender", "OutboxSender", "create_sender"]


def create_sender(config: DeliveryConfig) -> SenderPort:
    """Create sender adapter based on configuration."""
    if config.channel == DeliveryChannel.OUTBOX:
        return OutboxSender(config.outbox_dir)
    elif config.channel == DeliveryChannel.HTTP:
        return HttpSender(url=config.url, timeout=config.timeout)
    else:
        raise ValueError(f"Unknown delivery channel: {config.channel}")
