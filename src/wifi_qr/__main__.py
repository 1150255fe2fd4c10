"""Command line interface for printing Wi-Fi QR codes to the terminal."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from . import __version__
from . import generator, terminal
from .exceptions import WifiQRError
from .logging_config import level_from_verbosity, setup_logging
from .payload import Credentials, SecurityStandard, build_wifi_payload

logger = logging.getLogger(__name__)

DEFAULT_ECC = generator.ErrorCorrection.LOW
DEFAULT_BORDER = 0


def _border(value: str) -> int:
    try:
        border = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid border width: {value!r}") from exc
    if border < 0:
        raise argparse.ArgumentTypeError("border width must be 0 or greater")
    return border


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wifi-qr",
        description="Creates QR codes for logging into a Wi-Fi network.",
    )
    parser.add_argument("-s", "--ssid", required=True, help="Wi-Fi SSID")
    parser.add_argument("-p", "--password", "--psw", dest="password", help="Wi-Fi password")
    parser.add_argument(
        "--security",
        "--sec",
        dest="security",
        choices=[standard.value for standard in SecurityStandard],
        help="Wi-Fi security standard; omit for an open network",
    )
    parser.add_argument("--hidden", action="store_true", help="Mark the Wi-Fi network as hidden")
    parser.add_argument(
        "-e",
        "--ecc",
        choices=[level.value for level in generator.ErrorCorrection],
        default=DEFAULT_ECC.value,
        help="Error correction level (default: %(default)s)",
    )
    parser.add_argument(
        "--border",
        type=_border,
        default=DEFAULT_BORDER,
        help="Quiet-zone width in modules (default: %(default)s)",
    )
    parser.add_argument("-v", "--verbose", action="count", default=0, help="Log more details to stderr")
    parser.add_argument("--log-file", type=Path, help="Also write log records to this file")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def credentials_from_args(args: argparse.Namespace) -> Credentials:
    security = SecurityStandard(args.security) if args.security else None
    return Credentials(
        ssid=args.ssid,
        password=args.password,
        security=security,
        hidden=args.hidden,
    )


def main(argv: Optional[list[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(
        level_from_verbosity(args.verbose),
        str(args.log_file) if args.log_file else None,
    )
    try:
        credentials = credentials_from_args(args)
        payload = build_wifi_payload(credentials)
        matrix = generator.matrix_from_text(payload, ecc=args.ecc, border=args.border)
    except WifiQRError as exc:
        logger.debug("Aborting: %s", exc)
        parser.exit(1, f"{parser.prog}: error: {exc}\n")
    sys.stdout.write(terminal.render_matrix(matrix))
    return 0


if __name__ == "__main__":
    sys.exit(main())
