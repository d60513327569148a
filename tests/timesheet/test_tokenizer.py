import pytest

from src.timesheet_payroll.timesheet_payroll.core.exceptions import FormatError
from src.timesheet_payroll.timesheet_payroll.timesheet.tokenizer import split_fields, split_lines


def test_split_fields_keeps_commas_inside_quotes():
    assert split_fields('张三,"正常(08:55,19:20)",-') == ["张三", "正常(08:55,19:20)", "-"]


def test_split_fields_unescapes_doubled_quotes():
    assert split_fields('a,"say ""hi""",b') == ["a", 'say "hi"', "b"]


def test_split_fields_keeps_empty_fields():
    assert split_fields("a,,b,") == ["a", "", "b", ""]


def test_split_fields_unterminated_quote_runs_to_end_of_line():
    assert split_fields('a,"open,still open') == ["a", "open,still open"]


def test_split_lines_drops_blank_lines_and_carriage_returns():
    text = "h1\r\n\r\nh2\r\n   \nrow1\r\n"
    assert split_lines(text) == ["h1", "h2", "row1"]


def test_split_lines_strips_bom():
    assert split_lines("\ufeffh1\nh2\nrow")[0] == "h1"


def test_split_lines_requires_three_lines():
    with pytest.raises(FormatError):
        split_lines("h1\n\nh2\n")
