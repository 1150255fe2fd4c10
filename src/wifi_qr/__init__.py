"""Print Wi-Fi login QR codes in the terminal."""

__version__ = "0.0.1"

from .exceptions import EncodingError, InvalidCredentialsError, WifiQRError
from .generator import ErrorCorrection, matrix_from_text
from .payload import Credentials, SecurityStandard, build_wifi_payload, resolve_security
from .terminal import iter_lines, render_matrix

__all__ = [
    "Credentials",
    "EncodingError",
    "ErrorCorrection",
    "InvalidCredentialsError",
    "SecurityStandard",
    "WifiQRError",
    "build_wifi_payload",
    "iter_lines",
    "matrix_from_text",
    "render_matrix",
    "resolve_security",
]
