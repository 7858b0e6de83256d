import random
from collections import Counter

from interview.shuffle import shuffle


def test_shuffle_is_permutation():
    items = ["a", "b", "b", "c", "d", "e"]
    out = shuffle(items, random.Random(3))
    assert Counter(out) == Counter(items)
    assert len(out) == len(items)


def test_shuffle_does_not_mutate_input():
    items = ["q1", "q2", "q3", "q4"]
    shuffle(items, random.Random(1))
    assert items == ["q1", "q2", "q3", "q4"]


def test_shuffle_is_deterministic_for_seed():
    items = list(range(20))
    assert shuffle(items, random.Random(42)) == shuffle(items, random.Random(42))


def test_shuffle_empty_and_single():
    assert shuffle([], random.Random(0)) == []
    assert shuffle(["only"], random.Random(0)) == ["only"]
