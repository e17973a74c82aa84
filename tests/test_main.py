"""Тесты CLI проверки адресов."""

import io
import logging
from pathlib import Path

import pytest

from emailcheck.main import main
from emailcheck.modules.batch import EmailBatchChecker


def test_validate_mode(capsys: pytest.CaptureFixture[str]) -> None:
    code = main(["user+tag@gmail.com", "test@domain..com", "--mode", "validate"])

    out = capsys.readouterr().out.splitlines()
    assert code == 0
    assert out == ["user+tag@gmail.com\tvalid", "test@domain..com\tinvalid"]


def test_sanitize_mode(capsys: pytest.CaptureFixture[str]) -> None:
    main(["  USER@EXAMPLE.COM  ", "invalid", "--mode", "sanitize"])

    assert capsys.readouterr().out.splitlines() == ["user@example.com", ""]


def test_report_mode_reads_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    source = tmp_path / "emails.txt"
    source.write_text("test@example.com\n\nTE<S>T@..DOM-AIN..COM.\n", encoding="utf-8")

    code = main(["--file", str(source)])

    out = capsys.readouterr().out.splitlines()
    assert code == 0
    assert out == [
        "test@example.com\tvalid\ttest@example.com",
        "TE<S>T@..DOM-AIN..COM.\trepaired\ttest@dom-ain.com",
    ]


def test_reads_stdin_without_arguments(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO("a@b.co\na@b.co\n"))

    main(["--dedupe"])

    assert capsys.readouterr().out.splitlines() == [
        "a@b.co\tvalid\ta@b.co",
        "a@b.co\tduplicate\ta@b.co",
    ]


def test_strict_exit_code() -> None:
    assert main(["test@example.com", "--strict"]) == 0
    assert main(["test@example.com", "test@", "--strict"]) == 1
    assert main(["test@", "--mode", "validate"]) == 0


def test_missing_file_is_usage_error(tmp_path: Path) -> None:
    with pytest.raises(SystemExit) as exc_info:
        main(["--file", str(tmp_path / "missing.txt")])

    assert exc_info.value.code == 2


def test_undecodable_file_is_usage_error(tmp_path: Path) -> None:
    source = tmp_path / "emails.txt"
    source.write_bytes(b"a@b.co\n\xff\xfe@x.com\n")

    with pytest.raises(SystemExit) as exc_info:
        main(["--file", str(source)])

    assert exc_info.value.code == 2


def test_file_read_with_configured_encoding(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setenv("EMAILCHECK_INPUT_ENCODING", "cp1251")
    source = tmp_path / "emails.txt"
    source.write_bytes("тест@b.co\n".encode("cp1251"))

    main(["--file", str(source), "--mode", "sanitize"])

    assert capsys.readouterr().out.splitlines() == [""]


def test_dash_file_reads_stdin(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO("User@Example.com\n"))

    main(["--file", "-", "--mode", "sanitize"])

    assert capsys.readouterr().out.splitlines() == ["user@example.com"]


def test_keyboard_interrupt_stops_run(
    monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
) -> None:
    caplog.set_level(logging.INFO, logger="emailcheck.main")

    def interrupted(self: EmailBatchChecker, addresses: object) -> None:
        raise KeyboardInterrupt

    monkeypatch.setattr(EmailBatchChecker, "check", interrupted)

    assert main(["test@example.com"]) == 130
    assert "Проверка остановлена пользователем." in caplog.text


def test_unknown_encoding_is_usage_error(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EMAILCHECK_INPUT_ENCODING", "no-such-codec")
    source = tmp_path / "emails.txt"
    source.write_text("a@b.co\n", encoding="utf-8")

    with pytest.raises(SystemExit) as exc_info:
        main(["--file", str(source)])

    assert exc_info.value.code == 2
