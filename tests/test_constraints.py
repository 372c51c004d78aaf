import random

import pytest
from wordle_solver.engine import (
    ConstraintSet, Correctness, Guess, IndexOutOfRange, InvalidLength, is_consistent,
    parse_pattern, retain_consistent, score,
)

WORDS = ["crane", "raise", "stare", "trace", "cared", "racer", "scoop", "hello", "skirt",
         "shirt", "sleet", "those", "whose", "chose", "prose", "geese", "adieu", "lynch"]


def test_excluded_letter_filters_word():
    assert not is_consistent("hello", {"o"}, set(), {})
    assert is_consistent("hello", {"a"}, set(), {})


def test_required_letter_membership_only():
    assert not is_consistent("hello", set(), {"a"}, {})
    assert is_consistent("hello", set(), {"l"}, {})


def test_pinned_letter_must_match_position():
    assert not is_consistent("hello", set(), set(), {1: "a"})
    assert is_consistent("hello", set(), set(), {1: "e"})


@pytest.mark.parametrize("pos", [5, 9, -1])
def test_pinned_position_out_of_range_raises(pos):
    with pytest.raises(IndexOutOfRange):
        retain_consistent(["hello"], set(), set(), {pos: "h"})


def test_retain_consistent_preserves_order_and_is_idempotent():
    excluded, required, pinned = {"h"}, {"r"}, {0: "s"}
    once = retain_consistent(WORDS, excluded, required, pinned)
    assert once == ["stare", "skirt"]
    assert retain_consistent(once, excluded, required, pinned) == once


def test_filter_never_keeps_inconsistent_words():
    rng = random.Random(0)
    for _ in range(50):
        target = rng.choice(WORDS)
        guess = rng.choice(WORDS)
        cs = ConstraintSet()
        cs.absorb(Guess(guess, score(guess, target)))
        for w in cs.apply(WORDS):
            assert not any(c in w for c in cs.excluded)
            assert all(c in w for c in cs.required)
            assert all(w[p] == c for p, c in cs.pinned.items())


def test_filter_is_monotonic_over_a_game():
    rng = random.Random(1)
    target = "those"
    cs = ConstraintSet()
    words = list(WORDS)
    for _ in range(6):
        guess = rng.choice(WORDS)
        cs.absorb(Guess(guess, score(guess, target)))
        after = cs.apply(words)
        assert len(after) <= len(words)
        # naive evidence from the real target never rules the target out
        assert target in after
        words = after


def test_absorb_sorts_letters_into_buckets():
    cs = ConstraintSet()
    cs.absorb(Guess("shirt", score("shirt", "skirt")))
    assert cs.pinned == {0: "s", 2: "i", 3: "r", 4: "t"}
    assert cs.excluded == {"h"}
    assert cs.required == set()
    assert cs.length == 5


def test_absorb_never_unpins():
    cs = ConstraintSet()
    cs.absorb(Guess("ab", parse_pattern("GG")))
    cs.absorb(Guess("cb", parse_pattern("GG")))
    assert cs.pinned == {0: "a", 1: "b"}


def test_absorb_rejects_other_length_without_changes():
    cs = ConstraintSet()
    cs.absorb(Guess("abc", parse_pattern("G--")))
    with pytest.raises(InvalidLength):
        cs.absorb(Guess("abcd", parse_pattern("-Y--")))
    assert cs.pinned == {0: "a"} and cs.excluded == {"b", "c"} and cs.required == set()


def test_strict_surplus_copies_are_not_excluded():
    cs = ConstraintSet()
    cs.absorb(Guess("geese", score("geese", "those", mode="strict")), strict=True)
    assert cs.excluded == {"g"}
    assert "those" in cs.apply(WORDS)


def test_excluded_and_required_conflict_is_kept_and_reported():
    cs = ConstraintSet()
    cs.absorb(Guess("abc", (Correctness.ABSENT,) * 3))
    cs.absorb(Guess("bca", parse_pattern("-Y-")))
    assert "c" in cs.excluded and "c" in cs.required
    assert cs.conflicts() == {"c"}
    # not reconciled: nothing can satisfy both
    assert cs.apply(["cab", "xyz", "cxy"]) == []


def test_hand_recorded_surplus_absent_is_excluded_and_reported():
    # without strict evidence an ABSENT mark always excludes its letter
    cs = ConstraintSet()
    cs.absorb(Guess("geese", parse_pattern("---GG")))
    assert cs.excluded == {"g", "e"}
    assert cs.conflicts() == {"e"}
    assert cs.apply(["those", "whose"]) == []


def test_copy_is_independent():
    cs = ConstraintSet()
    cs.absorb(Guess("shirt", score("shirt", "skirt")))
    other = cs.copy()
    other.absorb(Guess("skirt", score("skirt", "skirt")))
    assert other.pinned[1] == "k"
    assert 1 not in cs.pinned and cs.excluded == {"h"}
