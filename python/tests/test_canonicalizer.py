"""Canonicalizer tests — relabeling must collapse every label permutation."""

from __future__ import annotations

import itertools

import pytest

from klotski.engine.canonicalizer import Canonicalizer
from klotski.models.level import LevelLoader

# Arrangements small enough to try every permutation of their labels.
_ARRANGEMENTS = {
    "pawns-3x4": "aAAbAA      ",
    "mixed-4x5": "1223" "1223" "4 55" "6  7" "8  7",
    "scattered": " c b a ",
    "single": "   z",
}


def _ids(name: str) -> str:
    return name


def _relabel(state: str, mapping: dict[str, str]) -> str:
    return "".join(mapping.get(c, c) for c in state)


# -- hand-checked cases -------------------------------------------------------


@pytest.mark.parametrize(
    ("state", "labels", "expected"),
    [
        ("2211", ("1", "2"), "1122"),
        (" 2 1", ("1", "2"), " 1 2"),
        ("1122", ("1", "2"), "1122"),
        ("aAAbAA      ", ("A", "a", "b"), "Aaabaa      "),
        ("cab", ("a", "b", "c"), "abc"),
        ("    ", (), "    "),
    ],
)
def test_normalize_known(state: str, labels: tuple[str, ...], expected: str) -> None:
    assert Canonicalizer.normalize(state, labels) == expected


def test_labels_are_sorted_and_skip_empty() -> None:
    assert Canonicalizer.labels("b a a c ") == ("a", "b", "c")


def test_normalize_keeps_length_and_empty_cells() -> None:
    state = "1223" "1223" "4567" "899a" "8  a"
    labels = Canonicalizer.labels(state)
    out = Canonicalizer.normalize(state, labels)
    assert len(out) == len(state)
    assert [i for i, c in enumerate(out) if c == " "] == [17, 18]
    assert Canonicalizer.labels(out) == labels


def test_normalize_does_not_touch_input() -> None:
    state = "ba"
    Canonicalizer.normalize(state, ("a", "b"))
    assert state == "ba"


# -- properties ---------------------------------------------------------------


@pytest.mark.parametrize("name", list(_ARRANGEMENTS), ids=_ids)
def test_idempotent(name: str) -> None:
    state = _ARRANGEMENTS[name]
    labels = Canonicalizer.labels(state)
    once = Canonicalizer.normalize(state, labels)
    assert Canonicalizer.normalize(once, labels) == once
    assert Canonicalizer.is_canonical(once, labels)


@pytest.mark.parametrize("name", list(_ARRANGEMENTS), ids=_ids)
def test_confluent_over_all_permutations(name: str) -> None:
    state = _ARRANGEMENTS[name]
    labels = Canonicalizer.labels(state)
    expected = Canonicalizer.normalize(state, labels)
    for perm in itertools.permutations(labels):
        permuted = _relabel(state, dict(zip(labels, perm)))
        assert Canonicalizer.normalize(permuted, labels) == expected, perm


def test_labels_appear_in_increasing_order() -> None:
    state = "9  8" "7654" "3210"
    labels = Canonicalizer.labels(state)
    out = Canonicalizer.normalize(state, labels)
    seen: list[str] = []
    for c in out:
        if c != " " and c not in seen:
            seen.append(c)
    assert seen == list(labels)


@pytest.mark.parametrize("level_id", LevelLoader().get_all_ids())
def test_bundled_levels_canonicalize_cleanly(level_id: str) -> None:
    initial = LevelLoader().get(level_id).initial
    labels = Canonicalizer.labels(initial)
    out = Canonicalizer.normalize(initial, labels)
    assert [c == " " for c in out] == [c == " " for c in initial]
    assert Canonicalizer.labels(out) == labels
    assert Canonicalizer.normalize(out, labels) == out
