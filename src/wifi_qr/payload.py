"""Wi-Fi connection descriptor helpers."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .exceptions import InvalidCredentialsError

logger = logging.getLogger(__name__)

RESERVED_CHARACTERS = ("\\", ";", ",", '"', ":")


class SecurityStandard(str, Enum):
    WEP = "wep"
    WPA = "wpa"
    WPA2 = "wpa2"
    WPA3 = "wpa3"

    @property
    def token(self) -> str:
        return {
            SecurityStandard.WEP: "Wep",
            SecurityStandard.WPA: "Wpa",
            SecurityStandard.WPA2: "Wpa2",
            SecurityStandard.WPA3: "Wpa3",
        }[self]


@dataclass(frozen=True)
class Credentials:
    ssid: str
    password: Optional[str] = None
    security: Optional[SecurityStandard] = None
    hidden: bool = False

    def __post_init__(self) -> None:
        if not self.ssid:
            raise InvalidCredentialsError("the network name must not be empty")


def resolve_security(
    security: Optional[SecurityStandard],
    password: Optional[str],
    *,
    default_security: SecurityStandard = SecurityStandard.WPA2,
) -> str:
    """Return the ``T:`` field for the given security/password combination.

    A password without a standard is assumed to be ``default_security``.
    A standard without a password is rejected rather than downgraded to an
    open network.
    """
    if security is None:
        return default_security.token if password else ""
    if not password:
        raise InvalidCredentialsError(
            f"a security standard was provided ({security.token}) but no password was provided",
            security=security.token,
        )
    return security.token


def build_wifi_payload(
    credentials: Credentials,
    *,
    default_security: SecurityStandard = SecurityStandard.WPA2,
) -> str:
    """Return the Wi-Fi QR payload string."""
    security = resolve_security(
        credentials.security,
        credentials.password,
        default_security=default_security,
    )
    password = credentials.password or ""
    _warn_reserved("network name", credentials.ssid)
    _warn_reserved("password", password)
    hidden_flag = "true" if credentials.hidden else "false"
    logger.debug(
        "Built descriptor for %r (security=%r, hidden=%s)",
        credentials.ssid,
        security,
        hidden_flag,
    )
    return f"WIFI:T:{security};S:{credentials.ssid};P:{password};H:{hidden_flag};;"


def _warn_reserved(label: str, value: str) -> None:
    # Values are emitted unescaped; scanners may split on these characters.
    found = sorted({char for char in value if char in RESERVED_CHARACTERS})
    if found:
        logger.warning(
            "The %s contains reserved characters %s which are not escaped",
            label,
            " ".join(found),
        )
