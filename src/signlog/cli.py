import sys
import logging
import argparse
from typing import List, Tuple

from .config import DEFAULT_BASE, DEFAULT_SPLIT_NUMBER, LOG_LEVEL
from .data import SeriesData, format_ticks
from .scale import SignLogScale

logger = logging.getLogger(__name__)


def parse_numbers(values: List[str]) -> List[float]:
    """Parse command arguments as numbers."""
    numbers = []
    for value in values:
        try:
            numbers.append(float(value))
        except ValueError:
            raise ValueError(f"Not a number: {value}")
    return numbers


def read_series_data(header_mode: str) -> SeriesData:
    """Read CSV series data from stdin."""
    if sys.stdin.isatty():
        raise ValueError("No input data. Please pipe CSV data when using --column.")

    csv_data = sys.stdin.read().strip()
    if not csv_data:
        raise ValueError("No input data received.")

    return SeriesData.from_csv(csv_data, header_mode)


def build_scale(args, numbers: List[float]) -> Tuple[SignLogScale, List[float]]:
    """
    Build a scale from the command line extent.

    Returns:
        - Scale with its extent and nice interval computed
        - Remaining numeric arguments after the extent
    """
    scale = SignLogScale(base=args.base)

    if args.column:
        if args.header:
            header_mode = 'yes'
        elif args.no_header:
            header_mode = 'no'
        else:
            header_mode = 'auto'
        data = read_series_data(header_mode)
        scale.union_extent_from_data(data, args.column)
        rest = numbers
    else:
        if len(numbers) < 2:
            raise ValueError("MIN and MAX required (or --column with CSV on stdin)")
        low, high = numbers[0], numbers[1]
        scale.union_extent((min(low, high), max(low, high)))
        rest = numbers[2:]

    logger.info("Raw extent: %s", scale.get_raw_extent())

    if args.nice_extent:
        scale.calc_nice_extent(
            args.split_number or DEFAULT_SPLIT_NUMBER,
            fix_min=args.fix_min,
            fix_max=args.fix_max,
        )
    else:
        scale.calc_nice_ticks(args.split_number)

    logger.info("Interval: %s", scale.get_interval())
    return scale, rest


def main():
    parser = argparse.ArgumentParser(
        description='Compute signed-log axis ticks and positions for ranges that may cross zero',
        epilog='Examples:\n'
               '  Major ticks: signlog ticks -500 800\n'
               '  Major ticks (short): signlog t -500 800\n'
               '  Ticks from data: cat data.csv | signlog ticks --column price\n'
               '  Minor ticks: signlog minor 1 1000 --split-number 4\n'
               '  Normalize: signlog normalize -100 100 -10 0 50\n'
               '  Scale ratios back: signlog scale -100 100 0 0.5 1\n',
        formatter_class=argparse.RawDescriptionHelpFormatter
    )

    parser.add_argument('command', nargs='*',
                        help='Command ("ticks"/"t", "minor"/"m", "normalize"/"n", "scale"/"sc") followed by MIN MAX and values')
    parser.add_argument('--base', '-b', type=float, default=DEFAULT_BASE,
                        help=f'Logarithm base (default: {DEFAULT_BASE})')
    parser.add_argument('--split-number', '-s', type=int,
                        help='Approximate number of ticks / minor subdivisions')
    parser.add_argument('--column', '-c',
                        help='Take the extent from this CSV column on stdin')
    parser.add_argument('--expand', '-e', action='store_true',
                        help='Expand end ticks to the enclosing powers of the base')
    parser.add_argument('--nice-extent', action='store_true',
                        help='Round the extent to the nice interval before computing ticks')
    parser.add_argument('--fix-min', action='store_true',
                        help='Keep the observed minimum when rounding the extent')
    parser.add_argument('--fix-max', action='store_true',
                        help='Keep the observed maximum when rounding the extent')
    header_group = parser.add_mutually_exclusive_group()
    header_group.add_argument('--header', action='store_true',
                              help='Force treating first row as headers')
    header_group.add_argument('--no-header', action='store_true',
                              help='Force treating first row as data')
    parser.add_argument('--verbose', '-v', action='store_true',
                        help='Show additional information')

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else LOG_LEVEL,
        format="%(asctime)s - %(levelname)s - %(message)s"
    )

    if not args.command:
        print("Error: No command specified.", file=sys.stderr)
        parser.print_help()
        sys.exit(1)

    command_aliases = {
        't': 'ticks',
        'm': 'minor',
        'n': 'normalize',
        'sc': 'scale',
    }
    command_type = command_aliases.get(args.command[0], args.command[0])

    try:
        numbers = parse_numbers(args.command[1:])

        if command_type == 'ticks':
            scale, _ = build_scale(args, numbers)
            ticks = scale.get_ticks(args.expand)
            values = [tick['value'] for tick in ticks]
            labels = [scale.get_label(tick) for tick in ticks]
            print(format_ticks(values, labels), end='')

        elif command_type == 'minor':
            scale, _ = build_scale(args, numbers)
            groups = scale.get_minor_ticks(args.split_number or DEFAULT_SPLIT_NUMBER)
            print(format_ticks([value for group in groups for value in group]), end='')

        elif command_type == 'normalize':
            scale, values = build_scale(args, numbers)
            if not values:
                raise ValueError("Values to normalize required after MIN MAX")
            print('value,normalized')
            for value in values:
                print(f"{value:.12g},{scale.normalize(value):.12g}")

        elif command_type == 'scale':
            scale, ratios = build_scale(args, numbers)
            if not ratios:
                raise ValueError("Ratios to scale required after MIN MAX")
            print('ratio,value')
            for ratio in ratios:
                print(f"{ratio:.12g},{scale.scale(ratio):.12g}")

        else:
            print(f"Error: Unknown command '{args.command[0]}'", file=sys.stderr)
            sys.exit(1)

    except (ValueError, KeyError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    main()
