"""CLI integration tests for sync and page lookups."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from barbook import cli


@pytest.fixture
def cli_runner() -> CliRunner:
    return CliRunner()


def _write_config(tmp_path: Path, nfl_workbook: Path) -> Path:
    cfg = tmp_path / "books.yaml"
    cfg.write_text(
        "output_path: out/page_config.py\n"
        "books:\n"
        f"  - id: nfl\n    file: {nfl_workbook.name}\n"
        "  - id: nba\n    file: NBA Barbook Trivia.xlsx\n",
        encoding="utf-8",
    )
    return cfg


def test_sync_writes_artifact_and_summary(
    cli_runner: CliRunner,
    tmp_path: Path,
    nfl_workbook: Path,
    isolated_logger: None,
) -> None:
    cfg = _write_config(tmp_path, nfl_workbook)

    result = cli_runner.invoke(
        cli.app,
        ["sync", "--config", str(cfg), "--report-dir", str(tmp_path / "report")],
    )

    assert result.exit_code == 0, result.stdout
    assert "Generated 5 pages for [nfl]" in result.stdout
    assert "Skipped [nba]" in result.stdout
    assert "2 warning(s) above - review before committing." in result.stdout

    artifact = tmp_path / "out" / "page_config.py"
    assert artifact.exists()
    assert "DO NOT EDIT BY HAND" in artifact.read_text(encoding="utf-8")

    report = (tmp_path / "report" / "sync_report.md").read_text(encoding="utf-8")
    assert "- **nfl**: 5 pages" in report
    assert "UnknownPageTypeWarning" in report
    warnings_csv = (tmp_path / "report" / "sync_warnings.csv").read_text(encoding="utf-8")
    assert warnings_csv.splitlines()[0] == "kind,book_id,page_num,message"
    assert len(warnings_csv.splitlines()) == 3


def test_sync_output_override(
    cli_runner: CliRunner,
    tmp_path: Path,
    nfl_workbook: Path,
    isolated_logger: None,
) -> None:
    cfg = _write_config(tmp_path, nfl_workbook)
    target = tmp_path / "elsewhere" / "pages.py"

    result = cli_runner.invoke(cli.app, ["sync", "--config", str(cfg), "--output", str(target)])

    assert result.exit_code == 0, result.stdout
    assert target.exists()
    assert not (tmp_path / "out" / "page_config.py").exists()


def test_sync_rejects_bad_config(cli_runner: CliRunner, tmp_path: Path, isolated_logger: None) -> None:
    result = cli_runner.invoke(cli.app, ["sync", "--config", str(tmp_path / "missing.yaml")])

    assert result.exit_code != 0


def test_show_page_prints_json(
    cli_runner: CliRunner,
    tmp_path: Path,
    nfl_workbook: Path,
    isolated_logger: None,
) -> None:
    cfg = _write_config(tmp_path, nfl_workbook)
    assert cli_runner.invoke(cli.app, ["sync", "--config", str(cfg)]).exit_code == 0
    artifact = tmp_path / "out" / "page_config.py"

    authored = cli_runner.invoke(cli.app, ["show-page", "--artifact", str(artifact), "--book", "nfl", "--page", "6"])
    assert authored.exit_code == 0, authored.stdout
    payload = json.loads(authored.stdout[authored.stdout.index("{"):])
    assert payload["type"] == "list"
    assert [item["clue"] for item in payload["items"]] == ["#1", "#2", "#3"]

    synthesized = cli_runner.invoke(cli.app, ["show-page", "--artifact", str(artifact), "--page", "12"])
    assert synthesized.exit_code == 0, synthesized.stdout
    payload = json.loads(synthesized.stdout[synthesized.stdout.index("{"):])
    assert payload["type"] == "text"
    assert "page 12" in payload["content"]

    out_of_range = cli_runner.invoke(cli.app, ["show-page", "--artifact", str(artifact), "--page", "101"])
    assert out_of_range.exit_code == 1

    unknown = cli_runner.invoke(cli.app, ["show-page", "--artifact", str(artifact), "--book", "nhl", "--page", "1"])
    assert unknown.exit_code == 1
