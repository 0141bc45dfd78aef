"""
Sorting engines.

Each engine is a generator over a plain list. It mutates the list in place
and yields a ``Step`` on every interesting moment (compare, swap, write,
pivot) plus unpaced bookkeeping steps (progress, bulk copy). Engines never
touch presentation or statistics; the playback controller consumes the steps.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


# ============================================================
# ======================== DESCRIPTORS =======================
# ============================================================

@dataclass(frozen=True)
class AlgorithmDescriptor:
    key:         str
    name:        str
    best:        str
    average:     str
    worst:       str
    space:       str
    description: str


ALGORITHMS = {
    "bubble": AlgorithmDescriptor(
        "bubble", "Bubble Sort", "O(n)", "O(n²)", "O(n²)", "O(1)",
        "Repeatedly compares adjacent elements and swaps them if they are in wrong order"),
    "selection": AlgorithmDescriptor(
        "selection", "Selection Sort", "O(n²)", "O(n²)", "O(n²)", "O(1)",
        "Finds the minimum element and places it at the beginning"),
    "insertion": AlgorithmDescriptor(
        "insertion", "Insertion Sort", "O(n)", "O(n²)", "O(n²)", "O(1)",
        "Builds the final sorted array one item at a time"),
    "merge": AlgorithmDescriptor(
        "merge", "Merge Sort", "O(n log n)", "O(n log n)", "O(n log n)", "O(n)",
        "Divides the array into halves, sorts them, and merges back"),
    "quick": AlgorithmDescriptor(
        "quick", "Quick Sort", "O(n log n)", "O(n log n)", "O(n²)", "O(log n)",
        "Selects a pivot element and partitions the array around it"),
}


# ============================================================
# =========================== STEPS ==========================
# ============================================================

class StepKind(Enum):
    COMPARE  = "compare"
    SWAP     = "swap"
    WRITE    = "write"
    PIVOT    = "pivot"
    SORTED   = "sorted"
    COPY     = "copy"
    PROGRESS = "progress"


# Steps that are shown and followed by a scheduler wait.
PACED_KINDS = frozenset({
    StepKind.COMPARE, StepKind.SWAP, StepKind.WRITE, StepKind.PIVOT, StepKind.SORTED,
})


@dataclass(frozen=True)
class Step:
    kind:     StepKind
    indices:  Tuple[int, ...] = ()
    progress: Optional[float] = None

    @property
    def paced(self) -> bool:
        return self.kind in PACED_KINDS


def compare(*indices):
    return Step(StepKind.COMPARE, indices)


def progress(fraction):
    return Step(StepKind.PROGRESS, progress=fraction)


def swap(arr, i, j):
    arr[i], arr[j] = arr[j], arr[i]
    return Step(StepKind.SWAP, (i, j))


# ============================================================
# ===================== SORTING ALGORITHMS ===================
# ============================================================

def bubble_sort(arr):
    n = len(arr)
    total = n * (n - 1) // 2
    done = 0
    for i in range(n - 1):
        for j in range(n - i - 1):
            yield compare(j, j + 1)
            if arr[j] > arr[j + 1]:
                yield swap(arr, j, j + 1)
            done += 1
            yield progress(done / total)


def selection_sort(arr):
    n = len(arr)
    for i in range(n - 1):
        mi = i
        for j in range(i + 1, n):
            yield compare(mi, j)
            if arr[j] < arr[mi]:
                mi = j
        if mi != i:
            yield swap(arr, i, mi)
        yield progress((i + 1) / n)


def insertion_sort(arr):
    n = len(arr)
    for i in range(1, n):
        j = i
        while j > 0:
            yield compare(j - 1, j)
            if arr[j - 1] <= arr[j]:
                break
            yield swap(arr, j - 1, j)
            j -= 1
        yield progress(i / (n - 1))


def _merge(arr, left, mid, right):
    L = arr[left:mid + 1]
    R = arr[mid + 1:right + 1]
    i = j = 0
    k = left
    while i < len(L) and j < len(R):
        yield compare(left + i, mid + 1 + j)
        if L[i] <= R[j]:
            arr[k] = L[i]; i += 1
        else:
            arr[k] = R[j]; j += 1
        yield Step(StepKind.WRITE, (k,))
        k += 1

    # Whatever is left over is already in order: copy it without comparing.
    tail = L[i:] + R[j:]
    if tail:
        arr[k:k + len(tail)] = tail
        yield Step(StepKind.COPY, tuple(range(k, k + len(tail))))

    yield progress(min(1.0, (right + 1) / len(arr)))


def merge_sort(arr):
    def _ms(left, right):
        if left < right:
            mid = (left + right) // 2
            yield from _ms(left, mid)
            yield from _ms(mid + 1, right)
            yield from _merge(arr, left, mid, right)
    yield from _ms(0, len(arr) - 1)


def partition(arr, low, high):
    """Lomuto partition around ``arr[high]``; the generator returns the pivot's final index."""
    pivot = arr[high]
    i = low - 1
    yield Step(StepKind.PIVOT, (high,))
    for j in range(low, high):
        yield compare(j, high)
        if arr[j] < pivot:
            i += 1
            if i != j:
                yield swap(arr, i, j)
    if i + 1 != high:
        yield swap(arr, i + 1, high)
    return i + 1


def quick_sort(arr):
    n = len(arr)
    settled = 0

    def _q(low, high):
        nonlocal settled
        if low < high:
            pi = yield from partition(arr, low, high)
            settled += 1
            yield progress(settled / n)
            yield from _q(low, pi - 1)
            yield from _q(pi + 1, high)
        elif low == high:
            settled += 1
            yield progress(settled / n)

    yield from _q(0, n - 1)


ENGINES = {
    "bubble":    bubble_sort,
    "selection": selection_sort,
    "insertion": insertion_sort,
    "merge":     merge_sort,
    "quick":     quick_sort,
}


def get_generator(key, arr):
    if key not in ENGINES:
        raise KeyError(f"Unknown key: {key}")
    return ENGINES[key](arr)


def run_to_completion(key, arr):
    """Drain an engine without pacing. Returns every step it produced."""
    return list(get_generator(key, arr))
