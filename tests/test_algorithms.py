"""Tests for the sorting engines."""

import functools
import random
from collections import Counter

import pytest

from sortviz.algorithms import (
    ALGORITHMS, ENGINES, StepKind, get_generator, partition, run_to_completion,
)


def drain(gen):
    """Exhaust a generator, returning (return value, yielded steps)."""
    steps = []
    while True:
        try:
            steps.append(next(gen))
        except StopIteration as stop:
            return stop.value, steps


def visible(steps):
    return [(s.kind, s.indices) for s in steps if s.kind is not StepKind.PROGRESS]


@functools.total_ordering
class Keyed:
    """Compares by key only; ``tag`` tells equal keys apart."""

    def __init__(self, key, tag):
        self.key, self.tag = key, tag

    def __eq__(self, other):
        return self.key == other.key

    def __lt__(self, other):
        return self.key < other.key

    def __repr__(self):
        return f"Keyed({self.key}, {self.tag})"


INPUTS = [
    [],
    [7],
    [2, 1],
    [1, 2, 3, 4, 5],
    [5, 4, 3, 2, 1],
    [4, 4, 4, 4],
    [3, 1, 3, 2, 1, 2],
    random.Random(11).choices(range(10, 360), k=40),
    random.Random(12).choices(range(1, 6), k=25),
]


class TestCorrectness:

    @pytest.mark.parametrize("key", list(ALGORITHMS))
    @pytest.mark.parametrize("values", INPUTS)
    def test_sorts_and_keeps_multiset(self, key, values):
        arr = list(values)
        run_to_completion(key, arr)
        assert arr == sorted(values)
        assert Counter(arr) == Counter(values)

    @pytest.mark.parametrize("key", ["merge", "insertion"])
    def test_stable_algorithms_keep_equal_keys_in_order(self, key):
        rng = random.Random(5)
        arr = [Keyed(rng.randint(1, 4), tag) for tag in range(30)]
        run_to_completion(key, arr)

        for a, b in zip(arr, arr[1:]):
            assert a.key <= b.key
            if a.key == b.key:
                assert a.tag < b.tag

    def test_registry_matches_descriptors(self):
        assert list(ENGINES) == list(ALGORITHMS)
        for key, descriptor in ALGORITHMS.items():
            assert descriptor.key == key

    def test_unknown_key(self):
        with pytest.raises(KeyError):
            get_generator("bogo", [1, 2])


class TestProgress:

    @pytest.mark.parametrize("key", list(ALGORITHMS))
    def test_progress_is_monotonic_and_bounded(self, key):
        arr = random.Random(3).choices(range(10, 360), k=33)
        fractions = [s.progress for s in run_to_completion(key, arr) if s.kind is StepKind.PROGRESS]

        assert fractions
        assert all(0.0 <= p <= 1.0 for p in fractions)
        assert fractions == sorted(fractions)

    @pytest.mark.parametrize("key", ["bubble", "insertion", "merge", "quick"])
    def test_progress_reaches_one(self, key):
        arr = [9, 3, 7, 1, 5, 2]
        fractions = [s.progress for s in run_to_completion(key, arr) if s.kind is StepKind.PROGRESS]
        assert fractions[-1] == pytest.approx(1.0)

    def test_selection_progress_per_position(self):
        arr = [4, 3, 2, 1]
        fractions = [s.progress for s in run_to_completion("selection", arr) if s.kind is StepKind.PROGRESS]
        assert fractions == [pytest.approx(x) for x in (1 / 4, 2 / 4, 3 / 4)]


class TestBubble:

    def test_first_pass_example(self):
        arr = [5, 3, 8, 1]
        gen = get_generator("bubble", arr)
        first_pass = []
        for step in gen:
            if step.kind is not StepKind.PROGRESS:
                first_pass.append((step.kind, step.indices))
            if len(first_pass) == 5:
                break

        assert first_pass == [
            (StepKind.COMPARE, (0, 1)),
            (StepKind.SWAP, (0, 1)),
            (StepKind.COMPARE, (1, 2)),
            (StepKind.COMPARE, (2, 3)),
            (StepKind.SWAP, (2, 3)),
        ]
        assert arr == [3, 5, 1, 8]

    def test_totals(self):
        arr = [5, 3, 8, 1]
        steps = run_to_completion("bubble", arr)
        kinds = Counter(s.kind for s in steps)

        assert arr == [1, 3, 5, 8]
        assert kinds[StepKind.COMPARE] == 6
        assert kinds[StepKind.SWAP] == 4

    def test_no_early_exit_on_sorted_input(self):
        steps = run_to_completion("bubble", list(range(10)))
        assert sum(s.kind is StepKind.COMPARE for s in steps) == 45
        assert not any(s.kind is StepKind.SWAP for s in steps)


class TestSelection:

    def test_no_swap_when_minimum_in_place(self):
        steps = run_to_completion("selection", [1, 2, 3])
        assert not any(s.kind is StepKind.SWAP for s in steps)

    def test_ties_take_first_minimum(self):
        arr = [2, 1, 1]
        steps = run_to_completion("selection", arr)
        swaps = [s.indices for s in steps if s.kind is StepKind.SWAP]
        assert swaps[0] == (0, 1)
        assert arr == [1, 1, 2]


class TestInsertion:

    def test_stops_at_first_non_inversion(self):
        steps = run_to_completion("insertion", [1, 2, 3, 0])
        compares = [s.indices for s in steps if s.kind is StepKind.COMPARE]
        assert compares == [(0, 1), (1, 2), (2, 3), (1, 2), (0, 1)]


class TestMerge:

    def test_tail_is_copied_without_comparisons(self):
        arr = [1, 2]
        steps = run_to_completion("merge", arr)
        assert visible(steps) == [
            (StepKind.COMPARE, (0, 1)),
            (StepKind.WRITE, (0,)),
            (StepKind.COPY, (1,)),
        ]

    def test_one_write_per_comparison(self):
        steps = run_to_completion("merge", [8, 7, 6, 5, 4, 3, 2, 1])
        kinds = Counter(s.kind for s in steps)
        assert kinds[StepKind.WRITE] == kinds[StepKind.COMPARE]
        assert kinds[StepKind.SWAP] == 0


class TestQuick:

    def test_partition_example(self):
        arr = [3, 7, 2, 9, 4]
        pi, steps = drain(partition(arr, 0, 4))

        assert pi == 2
        assert arr == [3, 2, 4, 9, 7]
        assert visible(steps)[0] == (StepKind.PIVOT, (4,))
        assert [s.indices for s in steps if s.kind is StepKind.SWAP] == [(1, 2), (2, 4)]

    def test_no_self_swaps(self):
        steps = run_to_completion("quick", [1, 2, 3, 4, 5])
        for s in steps:
            if s.kind is StepKind.SWAP:
                assert s.indices[0] != s.indices[1]

    def test_pivot_highlighted_once_per_partition(self):
        steps = run_to_completion("quick", [2, 1])
        assert visible(steps) == [
            (StepKind.PIVOT, (1,)),
            (StepKind.COMPARE, (0, 1)),
            (StepKind.SWAP, (0, 1)),
        ]
