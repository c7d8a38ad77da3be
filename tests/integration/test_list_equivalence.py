"""Equivalence tests comparing SinglyList against a reference Python list.

Cases are generated from fixed seeds so failures are reproducible.
"""

import random
import string

import pytest

from singly_list import SinglyList

SEEDS = list(range(25))


def random_words(rng: random.Random, low: int, high: int) -> list[str]:
    """Random strings, including empty ones."""
    return [
        "".join(rng.choices(string.printable, k=rng.randint(0, 8)))
        for _ in range(rng.randint(low, high))
    ]


def build(values):
    """Push values in reverse so the list reads in the original order."""
    seq = SinglyList()
    for value in reversed(values):
        seq.push(value)
    return seq


@pytest.mark.parametrize("seed", SEEDS)
def test_push_round_trip(seed):
    """Test pushing values reversed reads them back in order."""
    rng = random.Random(seed)
    values = [rng.randint(0, 500) for _ in range(rng.randint(0, 500))]

    seq = build(values)

    assert len(seq) == len(values)
    assert repr(seq) == repr(values)
    assert sum(1 for _ in seq.iter()) == len(values)


@pytest.mark.parametrize("seed", SEEDS)
def test_pop_push_inverse(seed):
    """Test popping k elements and pushing them back restores the list."""
    rng = random.Random(seed)
    values = random_words(rng, 1, 100)
    k = rng.randrange(len(values))

    seq = build(values)
    popped = []
    for _ in range(k):
        popped.append(seq.pop())

    assert len(seq) == len(values) - k
    assert popped == values[:k]
    assert repr(seq) == repr(values[k:])

    for value in reversed(popped):
        seq.push(value)

    assert len(seq) == len(values)
    assert repr(seq) == repr(values)


@pytest.mark.parametrize("seed", SEEDS)
def test_insert_matches_reference(seed):
    """Test repeated inserts at one index match list.insert."""
    rng = random.Random(seed)
    values = random_words(rng, 1, 100)
    index = rng.randrange(len(values))
    extra = random_words(rng, 0, 100)

    seq = build(values)
    expected = list(values)
    for value in extra:
        seq.insert(index, value)
        expected.insert(index, value)

    assert len(seq) == len(expected)
    assert repr(seq) == repr(expected)


@pytest.mark.parametrize("seed", SEEDS)
def test_insert_past_end_is_ignored(seed):
    """Test insert past the end leaves content and length unchanged."""
    rng = random.Random(seed)
    values = random_words(rng, 0, 50)

    seq = build(values)
    seq.insert(len(values) + rng.randint(1, 10), "extra")

    assert len(seq) == len(values)
    assert repr(seq) == repr(values)


@pytest.mark.parametrize("seed", SEEDS)
def test_delete_removes_middle_block(seed):
    """Test deleting at len(head) removes the middle block in order."""
    rng = random.Random(seed)
    head = random_words(rng, 0, 100)
    body = random_words(rng, 0, 100)
    tail = random_words(rng, 0, 100)

    seq = build(head + body + tail)
    deleted = []
    for _ in body:
        element = seq.delete(len(head))
        if element is not None:
            deleted.append(element)

    assert repr(seq) == repr(head + tail)
    assert deleted == body
    assert len(seq) == len(head) + len(tail)


@pytest.mark.parametrize("seed", SEEDS)
def test_mixed_operations_match_reference(seed):
    """Test random push/pop/insert/delete sequences match a Python list."""
    rng = random.Random(seed)
    seq = SinglyList()
    expected = []

    for _ in range(300):
        op = rng.choice(["push", "pop", "insert", "delete"])
        index = rng.randint(0, len(expected) + 2)
        value = rng.randint(0, 1000)

        if op == "push":
            seq.push(value)
            expected.insert(0, value)
        elif op == "pop":
            assert seq.pop() == (expected.pop(0) if expected else None)
        elif op == "insert":
            seq.insert(index, value)
            if index <= len(expected):
                expected.insert(index, value)
        else:
            result = seq.delete(index)
            if index < len(expected):
                assert result == expected.pop(index)
            else:
                assert result is None

        assert len(seq) == len(expected)

    assert list(seq) == expected
    assert list(seq.into_iter()) == expected
    assert seq.is_empty()
