"""
Pluralization form-class selectors.

Each selector takes a count and the tuple of word forms a language declares
for one scale word, and returns the form that agrees with the count:

    invariant        (form,)                 Chinese 万, Korean 만, Hindi लाख
    singular_plural  (singular, plural)      million / millions
    slavic_plural    (one, few, many)        тысяча / тысячи / тысяч
    polish_plural    (one, few, many)        tysiąc / tysiące / tysięcy
"""

from __future__ import annotations

from collections.abc import Callable, Sequence

PluralRule = Callable[[int, Sequence[str]], str]


def invariant(count: int, forms: Sequence[str]) -> str:
    return forms[0]


def singular_plural(count: int, forms: Sequence[str]) -> str:
    return forms[0] if count == 1 else forms[1]


def slavic_plural(count: int, forms: Sequence[str]) -> str:
    """East-Slavic rule: 1, 21, 101 → one; 2–4, 22–24 → few; 0, 5–20, 25 → many."""
    last_two = count % 100
    last = count % 10
    if 11 <= last_two <= 14:
        return forms[2]
    if last == 1:
        return forms[0]
    if 2 <= last <= 4:
        return forms[1]
    return forms[2]


def polish_plural(count: int, forms: Sequence[str]) -> str:
    """Polish rule: only exactly 1 takes the singular; 21 tysięcy, 22 tysiące."""
    if count == 1:
        return forms[0]
    last_two = count % 100
    if 2 <= count % 10 <= 4 and not 12 <= last_two <= 14:
        return forms[1]
    return forms[2]


# Number of word forms each rule indexes into, checked at profile build time.
FORM_COUNTS: dict[PluralRule, int] = {
    invariant: 1,
    singular_plural: 2,
    slavic_plural: 3,
    polish_plural: 3,
}
