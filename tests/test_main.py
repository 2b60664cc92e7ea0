"""End-to-end tests for the command-line entry point."""

from __future__ import annotations

import functools
import json
import re

import pytest
from conftest import MODE_NAMES

from calls_benchmark import BenchmarkSuite, BenchRun, benchmark_runner, create_parser, run
from calls_benchmark.main import main

LINE_PATTERN = re.compile(r"^(.+) :: \d+\.\d{4}s \(\d+\.\d{2}mil\. calls/sec\) \(\d+\.\d%\)$")
QUICK = ["--iterations", "1000", "--warmup-seconds", "0"]


class TestParser:
    def test_defaults(self):
        args = create_parser().parse_args([])
        assert args.iterations == 10_000_000
        assert args.rounds == 1
        assert args.warmup_seconds == 5.0
        assert not args.no_gc
        assert args.json_output is None
        assert not args.verbose

    @pytest.mark.parametrize(
        "argv",
        [
            ["--iterations", "0"],
            ["--rounds", "-2"],
            ["--warmup-seconds", "-1"],
            ["--warmup-seconds", "inf"],
            ["--warmup-seconds", "nan"],
            ["--iterations", "ten"],
        ],
    )
    def test_invalid_values(self, argv, capsys):
        with pytest.raises(SystemExit) as excinfo:
            create_parser().parse_args(argv)
        assert excinfo.value.code == 2


class TestMain:
    def test_end_to_end(self, capsys):
        assert main(QUICK) == 0

        lines = capsys.readouterr().out.splitlines()
        assert len(lines) == 8
        names = []
        for line in lines[:7]:
            match = LINE_PATTERN.match(line)
            assert match, line
            names.append(match.group(1))
        assert names == MODE_NAMES
        assert re.fullmatch(r"Result: 7000 => \d+\.\d{4}", lines[7])

    def test_rounds(self, capsys):
        assert main([*QUICK, "--rounds", "2", "--no-gc"]) == 0

        lines = capsys.readouterr().out.splitlines()
        assert len(lines) == 2 * 8 + 1
        assert lines[0] == "--- round 1/2 ---"
        assert lines[8] == "--- round 2/2 ---"
        assert lines[-1].startswith("Result: 14000 => ")

    def test_verbose_goes_to_stderr(self, capsys):
        assert main([*QUICK, "--verbose"]) == 0

        captured = capsys.readouterr()
        assert len(captured.out.splitlines()) == 8
        assert "METHOD LOOKUP" in captured.err
        assert "ROUND 1/1" in captured.err

    def test_json_output(self, tmp_path, capsys):
        path = tmp_path / "out" / "calls.json"
        assert main([*QUICK, "--json-output", str(path)]) == 0

        data = json.loads(path.read_text())
        assert data["result"] == 7000
        assert data["config"]["iterations"] == 1000
        assert data["config"]["rounds"] == 1
        assert [m["name"] for m in data["measurements"]] == MODE_NAMES
        assert data["measurements"][0]["percent_of_reference"] == pytest.approx(100.0)
        assert data["is_executed"]

    def test_lookup_failure_exit_code(self, monkeypatch, capsys):
        monkeypatch.setattr(benchmark_runner, "BenchRun", functools.partial(BenchRun, method_name="method_missing"))

        assert main(QUICK) == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "❌ Method lookup failed" in captured.err
        assert "method_missing" in captured.err

    def test_interrupt_exit_code(self, monkeypatch, capsys):
        def interrupt(self, bench_run):
            raise KeyboardInterrupt

        monkeypatch.setattr(BenchmarkSuite, "run_warmup", interrupt)

        assert main(QUICK) == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "❌ Benchmark interrupted by user" in captured.err


def test_run_returns_total(capsys):
    total = run(rounds=2, iterations=100, warmup_seconds=0)

    assert total >= 0.0
    lines = capsys.readouterr().out.splitlines()
    assert lines[-1].startswith("Result: 1400 => ")
