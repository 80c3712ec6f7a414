import math
import pytest
from signlog.data import (
    detect_delimiter,
    sanitize_column_name,
    auto_detect_headers,
    parse_number,
    SeriesData,
    format_ticks,
)


class TestAutoDetectHeaders:
    def test_detect_headers_with_text_headers(self):
        rows = [['name', 'age', 'salary'], ['John', '25', '50000'], ['Jane', '30', '65000']]
        assert auto_detect_headers(rows) == True

    def test_detect_no_headers_all_numeric(self):
        rows = [['1', '10', '100'], ['2', '20', '200'], ['3', '30', '300']]
        assert auto_detect_headers(rows) == False

    def test_detect_headers_mixed_types(self):
        rows = [['id', 'value1', 'value2'], ['1', '100', '200'], ['2', '300', '400']]
        assert auto_detect_headers(rows) == True

    def test_detect_single_row(self):
        rows = [['header1', 'header2', 'header3']]
        assert auto_detect_headers(rows) == True


class TestDetectDelimiter:
    def test_comma_delimiter(self):
        assert detect_delimiter("a,b,c\n1,2,3\n4,5,6") == ","

    def test_semicolon_delimiter(self):
        assert detect_delimiter("a;b;c\n1;2;3\n4;5;6") == ";"

    def test_tab_delimiter(self):
        assert detect_delimiter("a\tb\tc\n1\t2\t3\n4\t5\t6") == "\t"


class TestSanitizeColumnName:
    def test_normal_name(self):
        assert sanitize_column_name("column_name") == "column_name"

    def test_name_with_spaces(self):
        assert sanitize_column_name("column name") == "column_name"

    def test_name_starting_with_digit(self):
        assert sanitize_column_name("1st") == "col_1st"

    def test_empty_name(self):
        assert sanitize_column_name("") == "unnamed_column"


class TestParseNumber:
    def test_numbers(self):
        assert parse_number("42") == 42
        assert parse_number(" -1.5 ") == -1.5

    def test_not_numbers(self):
        assert parse_number("abc") is None
        assert parse_number("") is None
        assert parse_number(None) is None
        assert parse_number("nan") is None
        assert parse_number("inf") is None


class TestSeriesData:
    def test_approximate_extent(self):
        data = SeriesData({'y': [3, -20, 450, math.nan]})
        assert data.get_approximate_extent('y') == (-20, 450)

    def test_empty_dimension(self):
        data = SeriesData({'y': []})
        assert data.get_approximate_extent('y') == (math.inf, -math.inf)

    def test_unknown_dimension(self):
        with pytest.raises(KeyError):
            SeriesData({'y': [1]}).get_approximate_extent('x')

    def test_from_csv_with_headers(self):
        data = SeriesData.from_csv("x,y value\n1,-5\n2,300\n3,abc")
        assert data.dimensions == ['x', 'y_value']
        assert data.get_approximate_extent('y_value') == (-5, 300)
        assert data.get_values('x') == [1, 2, 3]

    def test_from_csv_without_headers(self):
        data = SeriesData.from_csv("1,2\n3,4\n5,6")
        assert data.dimensions == ['f1', 'f2']
        assert data.get_approximate_extent('f1') == (1, 5)

    def test_forced_header_mode(self):
        data = SeriesData.from_csv("1,2\n3,4", header_mode='no')
        assert data.get_approximate_extent('f2') == (2, 4)

    def test_invalid_header_mode(self):
        with pytest.raises(ValueError, match="Invalid header_mode"):
            SeriesData.from_csv("a,b\n1,2", header_mode='maybe')

    def test_empty_csv(self):
        with pytest.raises(ValueError):
            SeriesData.from_csv("")

    def test_headers_only(self):
        with pytest.raises(ValueError, match="No data rows"):
            SeriesData.from_csv("a,b", header_mode='yes')


class TestFormatTicks:
    def test_values_and_labels(self):
        assert format_ticks([1.0, 1000.0], ['1', '1,000']) == 'value,label\n1,1\n1000,"1,000"\n'

    def test_values_only(self):
        assert format_ticks([-0.5, 10.0]) == 'value\n-0.5\n10\n'
