"""CLI error-handling tests."""

from __future__ import annotations

from pathlib import Path

from mock_equivalency.cli import main


def test_missing_required_option_returns_clean_click_error(capsys) -> None:
    exit_code = main(["compare", "--actual", "/tmp/actual.yaml"])
    captured = capsys.readouterr()

    assert exit_code == 2
    assert "Missing option" in captured.err
    assert "--expected" in captured.err
    assert "Traceback" not in captured.err


def test_unknown_option_returns_clean_click_error(capsys) -> None:
    exit_code = main(["generate-config", "--bogus"])
    captured = capsys.readouterr()

    assert exit_code == 2
    assert "No such option: --bogus" in captured.err
    assert "Traceback" not in captured.err


def test_existing_output_file_is_reported_without_traceback(tmp_path: Path, capsys) -> None:
    output_path = tmp_path / "equivalency.yaml"
    output_path.write_text("existing", encoding="utf-8")

    exit_code = main(["generate-config", "--output", str(output_path)])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "Configuration file already exists" in captured.err
    assert "Traceback" not in captured.err


def test_missing_document_is_reported_without_traceback(tmp_path: Path, capsys) -> None:
    exit_code = main(
        [
            "compare",
            "--expected",
            str(tmp_path / "expected.yaml"),
            "--actual",
            str(tmp_path / "actual.yaml"),
        ]
    )
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "Document not found" in captured.err
    assert "Traceback" not in captured.err
