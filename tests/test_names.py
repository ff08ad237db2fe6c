import pytest

from names import (
    FIVE_LETTER_LAST_NAMES,
    gordle_guesses,
    letter_counts,
    name_value,
    no_overlap,
    opening_pairs,
)


def test_names_are_five_letters():
    assert all(len(n) == 5 and n.isalpha() for n in FIVE_LETTER_LAST_NAMES)
    assert len(set(FIVE_LETTER_LAST_NAMES)) == len(FIVE_LETTER_LAST_NAMES)


def test_valid_and_bad_letters():
    guesses = gordle_guesses(valid_letters="ak", bad_letters="d")
    assert "Makar" in guesses
    assert "Kakko" in guesses
    assert "Kadri" not in guesses
    for name in guesses:
        assert {"a", "k"} <= set(name.lower())
        assert "d" not in name.lower()


def test_placed_letters():
    assert gordle_guesses(placed_letters="..k.o") == ["Kakko"]
    assert gordle_guesses(placed_letters="s_a_l") == ["Staal"]
    assert "Smith" in gordle_guesses(placed_letters="S")


def test_placed_letter_not_treated_as_bad():
    assert gordle_guesses(bad_letters="o", placed_letters="....o") == ["Demko", "Kakko"]


def test_placed_pattern_too_long():
    with pytest.raises(ValueError):
        gordle_guesses(placed_letters="abcdef")


def test_no_constraints_returns_everything():
    assert gordle_guesses() == list(FIVE_LETTER_LAST_NAMES)


def test_letter_counts_and_value():
    counts = letter_counts(["abcde", "abxyz"])
    assert counts[0]["a"] == 2
    assert counts[2]["c"] == 1
    assert name_value("ABxyz", counts) == 2 + 2 + 1 + 1 + 1


def test_no_overlap():
    assert no_overlap("Smith", "Brown")
    assert not no_overlap("Smith", "Smyth")
    assert not no_overlap("burns", "BROWN")


def test_opening_pairs():
    # aaaab overlaps every other name, so it gets no partner
    pairs = opening_pairs(["aaaaa", "aaaab", "bbbbb"], top=2)
    assert pairs == [("aaaaa", "bbbbb")]
    for best, other in opening_pairs():
        assert no_overlap(best, other)
    assert 0 < len(opening_pairs()) <= 9
