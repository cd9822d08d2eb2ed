"""Signer adapters."""

from .hmac_signer import HmacSigner

__all__ = ["HmacSigner"]
