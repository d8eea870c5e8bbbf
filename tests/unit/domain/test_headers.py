import pytest

from excel2json.domain.headers import extract_headers, normalize_header


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("", ""),
        ("   ", ""),
        ("#", "number"),
        ("@", "at"),
        ("%", "percent"),
        ("$", "usd"),
        ("/", "slash"),
        ("&", "and"),
        (" # ", "number"),
        (" First Name ", "first_name"),
        ("Sales/Revenue", "sales_revenue"),
        ("Profit & Loss", "profit_and_loss"),
        ("R&D", "r_and_d"),
        ("__a__b__", "a_b"),
        ("Item #", "item"),
        ("Growth %", "growth_percent"),
        ("Price ($)", "price_usd"),
        ("Contact @ Site", "contact_at_site"),
        ("Amount (EUR)", "amount_eur"),
    ],
)
def test_normalize_header(raw, expected):
    assert normalize_header(raw) == expected


def test_normalize_is_idempotent():
    for raw in ["first_name", "Profit & Loss", "Sales/Revenue", "Price ($)"]:
        once = normalize_header(raw)
        assert normalize_header(once) == once


def test_symbol_table_only_applies_to_whole_header():
    # "##" is not in the table -> general rules -> collapses to nothing
    assert normalize_header("##") == ""
    assert normalize_header("#1") == "1"


def test_extract_headers_follows_selection_order():
    header = ["Name", "", "Age", "E-Mail Address"]
    assert extract_headers(header, [3, 0, 0]) == ["e-mail_address", "name", "name"]


def test_extract_headers_renders_non_text_cells():
    assert extract_headers([2024, True, None], [0, 1, 2]) == ["2024", "true", ""]


def test_extract_headers_fallback_for_missing_cell():
    assert extract_headers(["Name"], [0, 4]) == ["name", "column_5"]
