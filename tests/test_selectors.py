import pytest
from wordle_solver.engine import EmptyCandidateSet
from wordle_solver.solvers import create_selector, get_selector_ids, has_double_letter
from wordle_solver.solvers.avoid_doubles import DoubleLetterAvoidingSelector


class ScriptedRng:
    """randrange() walks through a fixed list of indices."""

    def __init__(self, picks):
        self.picks = list(picks)
        self.calls = 0

    def seed(self, seed=None):
        pass

    def randrange(self, n):
        i = self.picks[self.calls]
        self.calls += 1
        assert 0 <= i < n
        return i


DOUBLES = ["hello", "sleet", "geese", "llama", "cocoa", "added", "apple", "mummy", "puppy",
           "kayak", "radar", "tweet"]
SINGLES = ["crane", "skirt", "adieu"]


def test_has_double_letter():
    assert has_double_letter("hello") is True
    assert has_double_letter("friend") is False


def test_registry_lists_both_selectors():
    assert {"avoid_doubles", "random_consistent"} <= set(get_selector_ids())
    with pytest.raises(ValueError, match="Unknown selector id"):
        create_selector("nope")


@pytest.mark.parametrize("sid", ["avoid_doubles", "random_consistent"])
def test_empty_dictionary_raises(sid):
    with pytest.raises(EmptyCandidateSet):
        create_selector(sid).choose_next([])


@pytest.mark.parametrize("sid", ["avoid_doubles", "random_consistent"])
def test_choice_is_always_from_dictionary(sid):
    words = DOUBLES + SINGLES
    sel = create_selector(sid, seed=42)
    for _ in range(200):
        assert sel.choose_next(words) in words


def test_seeded_selectors_repeat():
    words = DOUBLES + SINGLES
    a = create_selector("avoid_doubles", seed=7)
    b = create_selector("avoid_doubles", seed=7)
    assert [a.choose_next(words) for _ in range(20)] == [b.choose_next(words) for _ in range(20)]


def test_small_dictionary_takes_first_sample():
    words = DOUBLES[:9]
    rng = ScriptedRng([3])
    sel = DoubleLetterAvoidingSelector(rng=rng)
    assert sel.choose_next(words) == words[3]
    assert rng.calls == 1


def test_large_dictionary_resamples_past_doubles():
    words = DOUBLES + SINGLES  # 15 words, singles at 12..14
    rng = ScriptedRng([0, 1, 2, 13])
    sel = DoubleLetterAvoidingSelector(rng=rng)
    assert sel.choose_next(words) == "skirt"
    assert rng.calls == 4


def test_rejections_are_bounded():
    words = DOUBLES[:10]  # threshold is "fewer than 10", so 10 words are screened
    rng = ScriptedRng([0, 1, 2, 3, 4, 5, 6])
    sel = DoubleLetterAvoidingSelector(rng=rng)
    # four rejections, then the fifth draw is taken as-is
    assert sel.choose_next(words) == words[4]
    assert rng.calls == 5
