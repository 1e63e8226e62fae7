"""Behavioral tests for the food table CLI."""

from __future__ import annotations

import csv
import json
import sys
from pathlib import Path

import pytest

from eurlex_food_controls.cli import scrape as scrape_cli
from eurlex_food_controls.download.eurlex import DownloadResult


def _no_download(*_args, **_kwargs):
    raise AssertionError("download_document should not be called")


def test_main_returns_exit_1_for_missing_input(monkeypatch, tmp_path: Path) -> None:
    missing_html = tmp_path / "missing.html"
    monkeypatch.setattr(scrape_cli, "download_document", _no_download)
    monkeypatch.setattr(
        sys,
        "argv",
        ["eurlex-food-table", "--html-669", str(missing_html), "--html-884", str(missing_html)],
    )

    with pytest.raises(SystemExit) as exc:
        scrape_cli.main()

    assert exc.value.code == 1


def test_main_writes_csv_from_saved_files(monkeypatch, tmp_path: Path, annex_files: tuple[Path, Path], capsys) -> None:
    path_669, path_884 = annex_files
    out_path = tmp_path / "out" / "food_table.csv"
    monkeypatch.setattr(scrape_cli, "download_document", _no_download)
    monkeypatch.setattr(
        sys,
        "argv",
        ["eurlex-food-table", "--html-669", str(path_669), "--html-884", str(path_884), "--out", str(out_path)],
    )

    scrape_cli.main()

    with open(out_path, newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert len(rows) == 5
    assert rows[-1] == {
        "Food": "Dried figs",
        "Code": "08042090",
        "TARIC": "",
        "Country": "Turkey",
        "Hazard": "Aflatoxins",
    }
    assert "Wrote 5 records" in capsys.readouterr().out


def test_main_writes_json_and_schema(monkeypatch, tmp_path: Path, annex_files: tuple[Path, Path]) -> None:
    path_669, path_884 = annex_files
    out_path = tmp_path / "food_table.json"
    schema_path = tmp_path / "food_table.schema.json"
    monkeypatch.setattr(scrape_cli, "download_document", _no_download)
    monkeypatch.setattr(
        sys,
        "argv",
        [
            "eurlex-food-table",
            "--html-669",
            str(path_669),
            "--html-884",
            str(path_884),
            "-o",
            str(out_path),
            "--schema",
            str(schema_path),
        ],
    )

    scrape_cli.main()

    payload = json.loads(out_path.read_text(encoding="utf-8"))
    assert len(payload["records"]) == 5
    assert payload["reports"][0]["rows_removed"] == 1
    assert schema_path.exists()


def test_main_exits_1_when_download_fails(monkeypatch, tmp_path: Path, annex_files: tuple[Path, Path]) -> None:
    path_669, _ = annex_files

    def fake_download(_url: str, output_path: Path, lang: str = "EN") -> DownloadResult:
        return DownloadResult(
            ok=False,
            status="requests_error",
            error="boom",
            output_path=output_path,
            final_url=None,
            bytes_written=0,
            method="requests",
        )

    monkeypatch.setattr(scrape_cli, "download_document", fake_download)
    monkeypatch.setattr(
        sys,
        "argv",
        ["eurlex-food-table", "--html-669", str(path_669), "--download-dir", str(tmp_path / "dl")],
    )

    with pytest.raises(SystemExit) as exc:
        scrape_cli.main()

    assert exc.value.code == 1


def test_main_exits_1_on_schema_mismatch(monkeypatch, tmp_path: Path, annex_files: tuple[Path, Path]) -> None:
    path_669, path_884 = annex_files
    monkeypatch.setattr(scrape_cli, "download_document", _no_download)
    monkeypatch.setattr(
        sys,
        "argv",
        ["eurlex-food-table", "--html-669", str(path_884), "--html-884", str(path_669), "-o", str(tmp_path / "x.csv")],
    )

    with pytest.raises(SystemExit) as exc:
        scrape_cli.main()

    assert exc.value.code == 1
