"""Tests for the wifi-qr command line interface."""

import logging

import pytest

from wifi_qr import __version__
from wifi_qr.__main__ import build_parser, credentials_from_args, main
from wifi_qr.generator import matrix_from_text
from wifi_qr.payload import SecurityStandard
from wifi_qr.terminal import render_matrix


@pytest.fixture(autouse=True)
def reset_package_logger():
    yield
    logger = logging.getLogger("wifi_qr")
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


def test_prints_qr_for_open_network(capsys):
    """The rendered code is written verbatim to stdout."""
    assert main(["--ssid", "Martin Router King"]) == 0

    out = capsys.readouterr().out
    expected = render_matrix(matrix_from_text("WIFI:T:;S:Martin Router King;P:;H:false;;"))
    assert out == expected


def test_security_password_hidden_and_ecc(capsys):
    assert main(["-s", "Home", "-p", "secret", "--sec", "wpa3", "--hidden", "-e", "high", "--border", "1"]) == 0

    out = capsys.readouterr().out
    payload = "WIFI:T:Wpa3;S:Home;P:secret;H:true;;"
    assert out == render_matrix(matrix_from_text(payload, ecc="high", border=1))


def test_security_without_password_exits_nonzero(capsys):
    """No QR code is printed for an invalid combination."""
    with pytest.raises(SystemExit) as excinfo:
        main(["--ssid", "X", "--security", "wpa2"])

    captured = capsys.readouterr()
    assert excinfo.value.code == 1
    assert captured.out == ""
    assert "Wpa2" in captured.err
    assert "no password" in captured.err


def test_encoding_failure_exits_nonzero(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["--ssid", "x" * 3000])

    captured = capsys.readouterr()
    assert excinfo.value.code == 1
    assert captured.out == ""
    assert "error correction level low" in captured.err


def test_empty_ssid_exits_nonzero(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["--ssid", ""])
    assert excinfo.value.code == 1
    assert capsys.readouterr().out == ""


def test_usage_errors(capsys):
    """argparse rejects unknown choices and missing options with status 2."""
    for argv in (["--password", "p"], ["-s", "n", "--sec", "wpa4"], ["-s", "n", "--border", "-1"]):
        with pytest.raises(SystemExit) as excinfo:
            main(argv)
        assert excinfo.value.code == 2
    assert capsys.readouterr().out == ""


def test_version(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["--version"])
    assert excinfo.value.code == 0
    assert __version__ in capsys.readouterr().out


def test_credentials_from_args():
    args = build_parser().parse_args(["--ssid", "Lab", "--psw", "pw", "--security", "wep"])
    creds = credentials_from_args(args)

    assert creds.ssid == "Lab"
    assert creds.password == "pw"
    assert creds.security is SecurityStandard.WEP
    assert creds.hidden is False


def test_log_file_receives_records(tmp_path, capsys):
    """Verbose runs log to the requested file without touching stdout."""
    log_path = tmp_path / "wifi-qr.log"

    assert main(["--ssid", "Lab", "-vv", "--log-file", str(log_path)]) == 0
    logging.getLogger("wifi_qr").handlers[-1].flush()

    out = capsys.readouterr().out
    assert "Encoded QR version" not in out
    assert "Encoded QR version" in log_path.read_text(encoding="utf-8")


def test_logs_do_not_reach_root_logger(capsys):
    """Records are handled once by the package handler, not again by root."""
    seen = []

    class Collect(logging.Handler):
        def emit(self, record):
            seen.append(record)

    root_handler = Collect()
    logging.getLogger().addHandler(root_handler)
    try:
        assert main(["--ssid", "a;b", "-v"]) == 0
    finally:
        logging.getLogger().removeHandler(root_handler)

    assert "reserved characters" in capsys.readouterr().err
    assert not [record for record in seen if record.name.startswith("wifi_qr")]


def test_unexpected_errors_are_not_reported_as_user_errors(monkeypatch):
    """Only wifi_qr errors become exit status 1."""

    def broken(*args, **kwargs):
        raise ValueError("encoder bug")

    monkeypatch.setattr("wifi_qr.generator.matrix_from_text", broken)
    with pytest.raises(ValueError, match="encoder bug"):
        main(["--ssid", "Lab"])
