"""Series data: named numeric columns loaded from delimited text."""
import csv
import io
import math
import re
from typing import Dict, Iterable, List, Optional, Tuple


def detect_delimiter(sample: str) -> str:
    """Detect the most likely delimiter in the CSV data."""
    delimiters = [',', ';', '\t', ' ', '|']
    delimiter_counts = {}

    # Count occurrences of each delimiter in the first few lines
    lines = sample.split('\n')[:5]
    for delimiter in delimiters:
        delimiter_counts[delimiter] = sum(line.count(delimiter) for line in lines)

    return max(delimiter_counts, key=delimiter_counts.get)


def sanitize_column_name(name: str) -> str:
    """Sanitize column names to be valid identifiers."""
    sanitized = re.sub(r'[^\w]', '_', str(name).strip())
    if sanitized and sanitized[0].isdigit():
        sanitized = 'col_' + sanitized
    if not sanitized:
        sanitized = 'unnamed_column'
    return sanitized


def parse_number(value: Optional[str]) -> Optional[float]:
    """Parse a cell as a finite number, or None if it is not one."""
    if value is None:
        return None
    try:
        number = float(str(value).strip())
    except ValueError:
        return None
    return number if math.isfinite(number) else None


def auto_detect_headers(rows: List[List[str]]) -> bool:
    """Auto-detect if the first row contains headers by comparing numeric field counts.

    Args:
        rows: List of CSV rows (at least 2 rows needed)

    Returns:
        True if first row likely contains headers, False otherwise
    """
    if len(rows) < 2:
        # Not enough data to detect, assume headers exist
        return True

    def count_numeric_fields(row):
        return sum(1 for field in row if field.strip() and parse_number(field) is not None)

    first_numeric_count = count_numeric_fields(rows[0])
    second_numeric_count = count_numeric_fields(rows[1])

    if first_numeric_count == 0 and second_numeric_count > 0:
        return True

    # Mostly numeric first row is data
    if first_numeric_count >= len(rows[0]) * 0.7:
        return False

    return first_numeric_count < second_numeric_count


class SeriesData:
    """Numeric columns addressed by dimension name."""

    def __init__(self, columns: Optional[Dict[str, Iterable[float]]] = None):
        self._columns: Dict[str, List[float]] = {}
        for name, values in (columns or {}).items():
            self._columns[name] = list(values)

    @property
    def dimensions(self) -> List[str]:
        return list(self._columns)

    def get_values(self, dim: str) -> List[float]:
        if dim not in self._columns:
            raise KeyError(f"Unknown dimension: {dim}")
        return self._columns[dim]

    def get_approximate_extent(self, dim: str) -> Tuple[float, float]:
        """(min, max) over the finite values of ``dim``; (inf, -inf) if none."""
        values = [v for v in self.get_values(dim) if v is not None and math.isfinite(v)]
        if not values:
            return math.inf, -math.inf
        return min(values), max(values)

    @classmethod
    def from_csv(cls, csv_data: str, header_mode: Optional[str] = None) -> 'SeriesData':
        """Build series data from CSV text.

        Args:
            csv_data: CSV data as string
            header_mode: 'auto' (default), 'yes', or 'no' for header detection

        Returns:
            SeriesData with one dimension per column; non-numeric cells are skipped
        """
        delimiter = detect_delimiter(csv_data)
        all_rows = [row for row in csv.reader(io.StringIO(csv_data), delimiter=delimiter) if row]

        if not all_rows:
            raise ValueError("No data found in CSV")

        if header_mode is None or header_mode == 'auto':
            has_headers = auto_detect_headers(all_rows)
        elif header_mode == 'yes':
            has_headers = True
        elif header_mode == 'no':
            has_headers = False
        else:
            raise ValueError(f"Invalid header_mode: {header_mode}")

        if has_headers:
            headers = [sanitize_column_name(h) for h in all_rows[0]]
            rows = all_rows[1:]
        else:
            # Generate column names f1, f2, ..., fn
            headers = [f"f{i+1}" for i in range(len(all_rows[0]))]
            rows = all_rows

        if not rows:
            raise ValueError("No data rows found in CSV")

        columns: Dict[str, List[float]] = {header: [] for header in headers}
        for row in rows:
            for header, cell in zip(headers, row):
                number = parse_number(cell)
                if number is not None:
                    columns[header].append(number)

        return cls(columns)


def format_ticks(values: List[float], labels: Optional[List[str]] = None) -> str:
    """Format tick values (and labels) as CSV."""
    output = io.StringIO(newline='')
    writer = csv.writer(output, lineterminator='\n')

    if labels is None:
        writer.writerow(['value'])
        for value in values:
            writer.writerow([f"{value:.12g}"])
    else:
        writer.writerow(['value', 'label'])
        for value, label in zip(values, labels):
            writer.writerow([f"{value:.12g}", label])

    return output.getvalue()
