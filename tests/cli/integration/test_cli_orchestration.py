"""CLI orchestration integration tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner
from provider_verifier.cli import cli, main


@pytest.fixture(autouse=True)
def _clear_diff_environment(monkeypatch) -> None:
    monkeypatch.delenv("PROVIDER_VERIFIER_GENERATE_DIFF", raising=False)
    monkeypatch.delenv("provider_verifier.generate_diff", raising=False)


def _write_config(tmp_path: Path, generate_diff: str) -> Path:
    path = tmp_path / "verifier.yaml"
    path.write_text(f'verifier:\n  generate_diff: "{generate_diff}"\n', encoding="utf-8")
    return path


def _write_json(path: Path, payload: object) -> Path:
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


def test_generate_config_writes_scaffold_once(tmp_path: Path, capsys) -> None:
    destination = tmp_path / "verifier.yaml"

    assert main(["generate-config", "--output", str(destination)]) == 0
    assert destination.exists()
    assert main(["generate-config", "--output", str(destination)]) == 1
    assert "already exists" in capsys.readouterr().err


@pytest.mark.parametrize(("length", "expected"), [("500", "enabled"), ("2000", "disabled")])
def test_diff_policy_reports_threshold_decision(tmp_path: Path, length: str, expected: str) -> None:
    runner = CliRunner()
    config_path = _write_config(tmp_path, "1KB")

    result = runner.invoke(cli, ["diff-policy", "--length", length, "--config", str(config_path)])

    assert result.exit_code == 0
    assert result.output.strip() == expected


def test_diff_policy_environment_overrides_configuration(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setenv("PROVIDER_VERIFIER_GENERATE_DIFF", "false")
    runner = CliRunner()
    config_path = _write_config(tmp_path, "true")

    result = runner.invoke(cli, ["diff-policy", "--length", "1", "--config", str(config_path)])

    assert result.output.strip() == "disabled"


def test_diff_policy_rejects_unparseable_size(tmp_path: Path, capsys) -> None:
    config_path = _write_config(tmp_path, "lots")

    exit_code = main(["diff-policy", "--length", "1", "--config", str(config_path)])

    assert exit_code == 1
    assert "Invalid diff configuration" in capsys.readouterr().err


def test_compare_bodies_succeeds_for_identical_payloads(tmp_path: Path) -> None:
    expected = _write_json(tmp_path / "expected.json", {"id": 1})
    actual = _write_json(tmp_path / "actual.json", {"id": 1})
    runner = CliRunner()

    result = runner.invoke(
        cli, ["compare-bodies", "--expected", str(expected), "--actual", str(actual)]
    )

    assert result.exit_code == 0
    assert result.output.strip() == "No mismatches found."


def test_compare_bodies_reports_json_paths_and_diff(tmp_path: Path) -> None:
    expected = _write_json(tmp_path / "expected.json", {"id": 1, "name": "a"})
    actual = _write_json(tmp_path / "actual.json", {"id": 2, "name": "a"})
    runner = CliRunner()

    result = runner.invoke(
        cli, ["compare-bodies", "--expected", str(expected), "--actual", str(actual)]
    )

    assert result.exit_code == 1
    assert "$.id:" in result.output
    assert "Diff:" in result.output


def test_compare_bodies_uses_literal_matching_for_custom_content_type(tmp_path: Path) -> None:
    expected = tmp_path / "expected.bin"
    actual = tmp_path / "actual.bin"
    expected.write_text("abc", encoding="utf-8")
    actual.write_text("abd", encoding="utf-8")
    config_path = _write_config(tmp_path, "false")

    exit_code = main(
        [
            "compare-bodies",
            "--expected",
            str(expected),
            "--actual",
            str(actual),
            "--content-type",
            "application/x-custom",
            "--config",
            str(config_path),
        ]
    )

    assert exit_code == 1


def test_compare_bodies_reports_unreadable_files(tmp_path: Path, capsys) -> None:
    exit_code = main(
        [
            "compare-bodies",
            "--expected",
            str(tmp_path / "missing.txt"),
            "--actual",
            str(tmp_path / "missing.txt"),
        ]
    )

    assert exit_code == 1
    assert "missing.txt" in capsys.readouterr().err
