import pytest

from excel2json.errors import FileOpenError, SheetNotFoundError
from excel2json.io_backends.csv_backend import CSVBackend


def test_read_grid_everything_is_text(tmp_path):
    (tmp_path / "people.csv").write_text("Name,Age\nJohn,25\n", encoding="utf-8")
    grid = CSVBackend().read_grid(str(tmp_path), "people")
    assert grid == [["Name", "Age"], ["John", "25"]]


def test_read_grid_short_rows_stay_short(tmp_path):
    (tmp_path / "s.csv").write_text("Name,Age,City\nJohn,25\nAnn,,Rome\n", encoding="utf-8")
    grid = CSVBackend().read_grid(str(tmp_path), "s")
    assert grid[1] == ["John", "25"]
    assert grid[2] == ["Ann", "", "Rome"]


def test_read_grid_ignores_bom(tmp_path):
    (tmp_path / "s.csv").write_bytes("\ufeffName\nx\n".encode("utf-8"))
    assert CSVBackend().read_grid(str(tmp_path), "s")[0] == ["Name"]


def test_read_grid_custom_delimiter(tmp_path):
    (tmp_path / "s.csv").write_text("A;B\n1;2\n", encoding="utf-8")
    assert CSVBackend(delimiter=";").read_grid(str(tmp_path), "s") == [["A", "B"], ["1", "2"]]


def test_read_grid_empty_file(tmp_path):
    (tmp_path / "s.csv").write_text("", encoding="utf-8")
    assert CSVBackend().read_grid(str(tmp_path), "s") == []


def test_read_grid_missing_sheet(tmp_path):
    (tmp_path / "other.csv").write_text("A\n", encoding="utf-8")
    with pytest.raises(SheetNotFoundError) as e:
        CSVBackend().read_grid(str(tmp_path), "s")
    assert "Available: other" in str(e.value)


def test_read_grid_missing_dir(tmp_path):
    with pytest.raises(FileOpenError):
        CSVBackend().read_grid(str(tmp_path / "nope"), "s")


def test_read_grid_row_wider_than_header(tmp_path):
    (tmp_path / "s.csv").write_text("Name,Age\nJohn,25,extra\nAnn\n", encoding="utf-8")
    grid = CSVBackend().read_grid(str(tmp_path), "s")
    assert grid == [["Name", "Age"], ["John", "25", "extra"], ["Ann"]]


def test_read_grid_quoted_fields_keep_their_count(tmp_path):
    (tmp_path / "s.csv").write_text('A,B\n"x, y"\n"multi\nline",2\n', encoding="utf-8")
    grid = CSVBackend().read_grid(str(tmp_path), "s")
    assert grid == [["A", "B"], ["x, y"], ["multi\nline", "2"]]


def test_read_grid_interior_empty_line_is_empty_row(tmp_path):
    (tmp_path / "s.csv").write_text("A\n1\n\n2\n", encoding="utf-8")
    assert CSVBackend().read_grid(str(tmp_path), "s") == [["A"], ["1"], [], ["2"]]
