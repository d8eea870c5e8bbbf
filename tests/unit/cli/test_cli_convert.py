import json
import sys

import pytest
from openpyxl import Workbook

from excel2json.cli.apps.convert import cli, main


@pytest.fixture
def book(tmp_path):
    wb = Workbook()
    ws = wb.active
    ws.title = "Sheet1"
    ws.append(["Name", "Age"])
    ws.append(["John", "25"])
    p = tmp_path / "book.xlsx"
    wb.save(p)
    return p


def test_main_writes_json_and_reports(tmp_path, book, capsys):
    out = tmp_path / "out.json"
    code = main([str(book), "Sheet1", "--output", str(out)])
    assert code == 0
    assert json.loads(out.read_text(encoding="utf-8")) == [{"name": "John", "age": "25"}]

    stdout = capsys.readouterr().out
    assert "Successfully converted Excel to JSON" in stdout
    assert f"Input: {book}" in stdout
    assert "Sheet: Sheet1" in stdout
    assert f"Output: {out}" in stdout
    assert "Visible columns: 2" in stdout
    assert "Total records: 1" in stdout


def test_main_with_columns_and_config(tmp_path, book):
    cfg = tmp_path / "cfg.yaml"
    cfg.write_text("indent: 4\nsheets:\n  Sheet1:\n    columns: '1'\n", encoding="utf-8")
    out = tmp_path / "out.json"
    assert main([str(book), "Sheet1", "-o", str(out), "--config", str(cfg), "-c", "2"]) == 0
    text = out.read_text(encoding="utf-8")
    assert json.loads(text) == [{"age": "25"}]
    assert '\n        "age"' in text


def test_main_requires_output(book):
    with pytest.raises(SystemExit) as e:
        main([str(book), "Sheet1"])
    assert e.value.code == 2


def test_cli_reports_bad_selector(tmp_path, book, monkeypatch, capsys):
    out = tmp_path / "out.json"
    monkeypatch.setattr(sys, "argv", ["excel2json", str(book), "Sheet1", "-o", str(out), "-c", "0"])
    with pytest.raises(SystemExit) as e:
        cli()
    assert e.value.code == 1
    assert "Error (selector_out_of_range)" in capsys.readouterr().err
    assert not out.exists()


def test_cli_reports_missing_file(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr(
        sys, "argv", ["excel2json", str(tmp_path / "nope.xlsx"), "Sheet1", "-o", str(tmp_path / "o.json")]
    )
    with pytest.raises(SystemExit) as e:
        cli()
    assert e.value.code == 1
    assert "Error (file_open)" in capsys.readouterr().err
