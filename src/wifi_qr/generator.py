"""QR data helpers."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Tuple, Union

import qrcode
from qrcode.constants import ERROR_CORRECT_H, ERROR_CORRECT_L, ERROR_CORRECT_M, ERROR_CORRECT_Q
from qrcode.exceptions import DataOverflowError

from .exceptions import EncodingError

logger = logging.getLogger(__name__)


class ErrorCorrection(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    QUARTILE = "quartile"
    HIGH = "high"

    @property
    def qr_constant(self) -> int:
        return {
            ErrorCorrection.LOW: ERROR_CORRECT_L,
            ErrorCorrection.MEDIUM: ERROR_CORRECT_M,
            ErrorCorrection.QUARTILE: ERROR_CORRECT_Q,
            ErrorCorrection.HIGH: ERROR_CORRECT_H,
        }[self]


def create_qr_code(text: str, ecc: ErrorCorrection, border: int) -> qrcode.QRCode:
    qr = qrcode.QRCode(
        version=None,
        error_correction=ecc.qr_constant,
        box_size=1,
        border=border,
    )
    qr.add_data(text)
    try:
        qr.make(fit=True)
    except (DataOverflowError, ValueError) as exc:
        # qrcode < 8 raises DataOverflowError past version 40, later releases
        # reject version 41 with a ValueError from check_version.
        reason = str(exc) or "data too long"
        raise EncodingError(
            f"cannot encode {len(text)} characters at error correction level {ecc.value}: {reason}"
        ) from exc
    return qr


def matrix_from_text(
    text: str,
    ecc: Union[ErrorCorrection, str] = ErrorCorrection.LOW,
    border: int = 0,
) -> Tuple[Tuple[bool, ...], ...]:
    """Encode ``text`` into a matrix of booleans representing the QR code."""
    try:
        level = ErrorCorrection(ecc.lower() if isinstance(ecc, str) else ecc)
    except ValueError as exc:
        raise ValueError(f"unknown ECC level: {ecc}") from exc
    if border < 0:
        raise ValueError("border must be 0 or greater")
    qr = create_qr_code(text, level, border)
    logger.info("Encoded QR version %s at ECC level %s", qr.version, level.value)
    return tuple(tuple(bool(cell) for cell in row) for row in qr.get_matrix())
