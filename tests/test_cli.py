"""Tests for the command line entry point."""

from sortviz.__main__ import parse_args, run_headless, run_instant
from sortviz.config import DEFAULT_ALGORITHM, DEFAULT_ARRAY_SIZE, DEFAULT_SPEED


class TestCli:

    def test_defaults(self):
        args = parse_args([])
        assert args.algorithm == DEFAULT_ALGORITHM
        assert args.size == DEFAULT_ARRAY_SIZE
        assert args.speed == DEFAULT_SPEED
        assert not args.headless and not args.instant

    def test_instant_sorts_given_list(self):
        args = parse_args(["--instant", "--algorithm", "merge", "--list", "5", "3", "8", "1"])
        assert run_instant(args) == [1, 3, 5, 8]

    def test_headless_runs_to_completion(self):
        args = parse_args(["--headless", "--speed", "10", "--list", "3", "1", "2"])
        values, stats = run_headless(args)
        assert values == [1, 2, 3]
        assert stats["comparisons"] == 3
        assert stats["swaps"] == 2
