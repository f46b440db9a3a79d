"""Unit tests for minimalpack.sequences."""

import random
from collections import Counter

import pytest

from minimalpack.errors import InvalidArgumentError
from minimalpack.sequences import (
    LazySequence,
    append,
    are_all_same,
    concatenate,
    for_each,
    is_empty,
    is_not_empty,
    is_null_or_empty,
    join,
    pick_random,
    pick_random_many,
    prepend,
    shuffle,
    this_or_empty,
    yield_one,
)

# pylint: disable=redefined-outer-name

# ============================================================================
#                               Composition
# ============================================================================


def test_append_and_prepend():
    """The extra element lands at the end or the beginning."""
    assert list(append([1, 2], 3)) == [1, 2, 3]
    assert list(prepend([1, 2], 0)) == [0, 1, 2]


def test_append_and_prepend_none_source():
    """A None source behaves like an empty one."""
    assert list(append(None, 1)) == [1]
    assert list(prepend(None, 1)) == [1]
    assert list(append(prepend(None, 0), 1)) == [0, 1]


def test_append_is_lazy():
    """Nothing is pulled from the source until iteration starts."""
    pulled: list[int] = []

    def source():
        for i in range(3):
            pulled.append(i)
            yield i

    seq = append(source(), 99)
    assert not pulled
    assert list(seq) == [0, 1, 2, 99]
    assert pulled == [0, 1, 2]


def test_append_restartable_over_restartable_source():
    """Re-iterating a sequence over a list re-runs the composition."""
    seq = prepend(append([1, 2], 3), 0)
    assert list(seq) == [0, 1, 2, 3]
    assert list(seq) == [0, 1, 2, 3]


def test_append_over_one_shot_source():
    """Over a generator, the second pass only yields the appended element."""
    seq = append((i for i in range(2)), 9)
    assert list(seq) == [0, 1, 9]
    assert list(seq) == [9]


def test_yield_one():
    """A single value becomes a one-element sequence."""
    seq = yield_one("x")
    assert isinstance(seq, LazySequence)
    assert list(seq) == ["x"]
    assert list(seq) == ["x"]


def test_this_or_empty():
    """None becomes an empty iterable; anything else passes through."""
    items = [1]
    assert this_or_empty(items) is items
    assert list(this_or_empty(None)) == []


# ============================================================================
#                               Random sampling
# ============================================================================


def test_shuffle_is_a_permutation(rng):
    """Shuffling keeps every element exactly once."""
    source = list(range(20))
    assert sorted(shuffle(source, rng=rng)) == source


def test_shuffle_reshuffles_on_each_iteration(rng):
    """Every iteration draws a fresh permutation."""
    seq = shuffle(list(range(30)), rng=rng)
    orders = {tuple(seq) for _ in range(5)}
    assert len(orders) > 1


def test_shuffle_seeded_is_reproducible():
    """Two generators with the same seed produce the same order."""
    source = list(range(10))
    first = list(shuffle(source, rng=random.Random(7)))
    second = list(shuffle(source, rng=random.Random(7)))
    assert first == second


def test_shuffle_does_not_touch_source(rng):
    """The source list is copied, never shuffled in place."""
    source = [1, 2, 3, 4]
    list(shuffle(source, rng=rng))
    assert source == [1, 2, 3, 4]


def test_shuffle_none():
    """Shuffling None yields nothing."""
    assert not list(shuffle(None))


def test_shuffle_is_roughly_uniform(rng):
    """Each element shows up in first position with similar frequency."""
    counts = Counter(next(iter(shuffle("abc", rng=rng))) for _ in range(3000))
    assert set(counts) == {"a", "b", "c"}
    assert all(800 < n < 1200 for n in counts.values())


def test_pick_random(rng):
    """The picked element comes from the source."""
    assert pick_random([1, 2, 3], rng=rng) in {1, 2, 3}


def test_pick_random_none_and_empty():
    """None and empty sources give the default."""
    assert pick_random(None) is None
    assert pick_random([], default=-1) == -1
    assert pick_random(None, default="x") == "x"


def test_pick_random_many(rng):
    """Picks are distinct positions of the source."""
    picked = list(pick_random_many(range(10), 4, rng=rng))
    assert len(picked) == 4
    assert len(set(picked)) == 4
    assert set(picked) <= set(range(10))


def test_pick_random_many_never_pads(rng):
    """Asking for more than available returns what is there."""
    picked = list(pick_random_many([1, 2], 5, rng=rng))
    assert sorted(picked) == [1, 2]


@pytest.mark.parametrize("count", [0, -2])
def test_pick_random_many_non_positive_count(count):
    """Zero or negative counts yield nothing."""
    assert not list(pick_random_many([1, 2, 3], count))


def test_pick_random_many_none():
    """A None source yields nothing."""
    assert not list(pick_random_many(None, 3))


# ============================================================================
#                               Inspection
# ============================================================================


@pytest.mark.parametrize(
    "values, expected",
    [
        ([], True),
        ([1], True),
        ([2, 2, 2], True),
        ([2, 2, 3], False),
        ([None, None], True),
        ([None, 1], False),
        (["a", "a"], True),
    ],
)
def test_are_all_same(values, expected):
    """All elements must equal the first one."""
    assert are_all_same(values) is expected


def test_are_all_same_none():
    """A None iterable is a contract violation."""
    with pytest.raises(InvalidArgumentError, match="'iterable'"):
        are_all_same(None)


def test_is_empty_consumes_at_most_one():
    """Emptiness checks pull a single element at most."""
    iterator = iter([1, 2, 3])
    assert is_not_empty(iterator)
    assert list(iterator) == [2, 3]


def test_is_empty_variants():
    """is_empty, is_not_empty and is_null_or_empty agree."""
    assert is_empty([])
    assert not is_empty([0])
    assert is_not_empty([None])
    assert is_null_or_empty(None)
    assert is_null_or_empty(iter(()))
    assert not is_null_or_empty("x")


@pytest.mark.parametrize("check", [is_empty, is_not_empty])
def test_is_empty_rejects_none(check):
    """Only is_null_or_empty tolerates None."""
    with pytest.raises(InvalidArgumentError):
        check(None)


# ============================================================================
#                               Eager helpers
# ============================================================================


def test_for_each_runs_in_order_and_returns_source():
    """Actions run per element in order; the source comes back."""
    seen: list[int] = []
    items = [3, 1, 2]
    assert for_each(items, seen.append) is items
    assert seen == [3, 1, 2]


def test_for_each_noops():
    """None iterable or None action do nothing."""
    items = [1]
    assert for_each(None, print) is None
    assert for_each(items, None) is items


def test_join():
    """Elements are stringified; None elements are empty."""
    assert join(range(3), "|") == "0|1|2"
    assert join(["a", None, "c"], ",") == "a,,c"
    assert join(None, ",") == ""


def test_concatenate():
    """Strings are joined with no separator and None skipped."""
    assert concatenate(["ab", "c", None, "d"]) == "abcd"
    assert concatenate([]) == ""
    assert concatenate(None) == ""
