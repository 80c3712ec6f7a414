"""Test the signlog command line."""
import subprocess
import sys
import pytest


def run_signlog(*args, input_data=None):
    return subprocess.run(
        [sys.executable, "-m", "signlog", *args],
        input=input_data,
        capture_output=True,
        text=True
    )


class TestTicksCommand:
    """Test the ticks command."""

    def test_crossing_range(self):
        proc = run_signlog("ticks", "-500", "800")

        assert proc.returncode == 0
        lines = proc.stdout.strip().splitlines()
        assert lines[0] == "value,label"
        values = [float(line.split(',')[0]) for line in lines[1:]]
        assert values == [-500, -100, -10, 0, 10, 100, 800]

    def test_short_alias_and_expand(self):
        proc = run_signlog("t", "-500", "800", "--expand")

        assert proc.returncode == 0
        assert '1000,"1,000"' in proc.stdout
        assert '-1000,"-1,000"' in proc.stdout

    def test_reversed_bounds(self):
        proc = run_signlog("ticks", "1000", "1")

        assert proc.returncode == 0
        values = [float(line.split(',')[0]) for line in proc.stdout.strip().splitlines()[1:]]
        assert values == [1, 10, 100, 1000]

    def test_ticks_from_column(self):
        csv_data = "t,v\n1,-20\n2,450\n3,7"
        proc = run_signlog("ticks", "--column", "v", input_data=csv_data)

        assert proc.returncode == 0
        values = [float(line.split(',')[0]) for line in proc.stdout.strip().splitlines()[1:]]
        assert values == [-20, -10, 0, 10, 100, 450]

    def test_unknown_column(self):
        proc = run_signlog("ticks", "--column", "missing", input_data="a,b\n1,2\n3,4")

        assert proc.returncode == 1
        assert "Error" in proc.stderr

    def test_missing_max(self):
        proc = run_signlog("ticks", "5")

        assert proc.returncode == 1
        assert "MIN and MAX required" in proc.stderr


class TestQueryCommands:
    """Test minor, normalize and scale commands."""

    def test_minor(self):
        proc = run_signlog("minor", "1", "1000", "--split-number", "2")

        assert proc.returncode == 0
        lines = proc.stdout.strip().splitlines()
        assert lines[0] == "value"
        assert lines[1] == "5.5"
        assert len(lines) == 4

    def test_normalize(self):
        proc = run_signlog("normalize", "-100", "100", "0", "10")

        assert proc.returncode == 0
        lines = proc.stdout.strip().splitlines()
        assert lines[0] == "value,normalized"
        assert lines[1] == "0,0.5"
        assert lines[2] == "10,0.75"

    def test_scale(self):
        proc = run_signlog("sc", "-100", "100", "0.75")

        assert proc.returncode == 0
        assert "0.75,10" in proc.stdout

    def test_not_a_number(self):
        proc = run_signlog("normalize", "-100", "abc")

        assert proc.returncode == 1
        assert "Not a number" in proc.stderr


class TestErrors:
    def test_no_command(self):
        proc = run_signlog()

        assert proc.returncode == 1
        assert "No command specified" in proc.stderr

    def test_unknown_command(self):
        proc = run_signlog("plot", "1", "2")

        assert proc.returncode == 1
        assert "Unknown command" in proc.stderr
