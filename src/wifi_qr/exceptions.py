"""Errors raised while turning credentials into a QR code."""

from __future__ import annotations

from typing import Optional


class WifiQRError(Exception):
    """Base class for wifi_qr failures."""


class InvalidCredentialsError(WifiQRError, ValueError):
    """The credentials cannot describe a network.

    ``security`` is set when a security standard was given without a password.
    """

    def __init__(self, message: str, security: Optional[str] = None) -> None:
        super().__init__(message)
        self.security = security


class EncodingError(WifiQRError):
    """The descriptor cannot be represented as a QR code."""
