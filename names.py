# names.py
# Five-letter NHL surnames for the gordle helper.
from collections import Counter

FIVE_LETTER_LAST_NAMES = (
    "Allen", "Blake", "Bossy", "Bratt", "Brown", "Burns", "Chara", "Clark",
    "Coyle", "Demko", "Drury", "Dumba", "Elias", "Faulk", "Fiala", "Gomez",
    "Hagel", "Halak", "Hasek", "Hertl", "Hintz", "Hossa", "Hyman", "Jarry",
    "Jones", "Kadri", "Kakko", "Keith", "Kempe", "Koivu", "Kurri", "Kyrou",
    "Laine", "Lucic", "Makar", "Meier", "Myers", "Necas", "Neely", "Nolan",
    "Nurse", "Oshie", "Palat", "Perry", "Petry", "Pionk", "Point", "Price",
    "Quick", "Ruutu", "Sakic", "Saros", "Sharp", "Smith", "Smyth", "Staal",
    "Stone", "Sturm", "Tanev", "Tatar", "Terry", "Toews", "Vaive", "Vanek",
    "Weber", "Zubov", "Boyle",
)

WILDCARDS = "._? "


def letter_counts(names=FIVE_LETTER_LAST_NAMES):
    """One Counter per position: how often each letter sits there."""
    counts = [Counter() for _ in range(5)]
    for name in names:
        for i, c in enumerate(name.lower()):
            counts[i][c] += 1
    return counts


def name_value(name, counts):
    return sum(counts[i].get(c, 0) for i, c in enumerate(name.lower()))


def no_overlap(a, b):
    """True when no position holds the same letter in both names."""
    return all(x != y for x, y in zip(a.lower(), b.lower()))


def opening_pairs(names=FIVE_LETTER_LAST_NAMES, top=9):
    """Best-scoring names, each paired with the best name sharing no placed letter."""
    counts = letter_counts(names)
    ranked = sorted(((name_value(n, counts), n) for n in names), reverse=True)
    pairs = []
    for _, best in ranked[:top]:
        for _, other in ranked:
            if no_overlap(best, other):
                pairs.append((best, other))
                break
    return pairs


def gordle_guesses(valid_letters="", bad_letters="", placed_letters="", names=FIVE_LETTER_LAST_NAMES):
    """Names containing every valid letter, none of the bad ones, and
       matching the placed pattern (e.g. `..k.o`)."""
    pattern = placed_letters.lower()
    valid = set(valid_letters.lower())
    bad = set(bad_letters.lower()) - valid - set(pattern)
    if len(pattern) > 5:
        raise ValueError(f"placed letters pattern longer than 5: {placed_letters!r}")

    guesses = []
    for name in names:
        low = name.lower()
        if not valid <= set(low):
            continue
        if bad & set(low):
            continue
        if any(p not in WILDCARDS and p != c for p, c in zip(pattern, low)):
            continue
        guesses.append(name)
    return guesses
