from __future__ import annotations

import functools
from dataclasses import dataclass
from typing import Callable, Dict, Iterable, List

from .models import Thesis


__all__ = [
    "fold_initial",
    "compare_author_first",
    "compare_year_first",
    "OrderPolicy",
    "AUTHOR_FIRST",
    "YEAR_FIRST",
    "POLICIES",
    "get_policy",
    "sort_theses",
]


def _cmp(a: str, b: str) -> int:
    return (a > b) - (a < b)


def fold_initial(author: str) -> str:
    """
    Upper-case only the first character of an author name so "adams, k."
    sorts next to "Adams, K."; the rest of the string keeps its case.
    """
    return author[:1].upper() + author[1:]


def compare_author_first(t1: Thesis, t2: Thesis) -> int:
    """
    Order by author, then by year when the authors are equal. Years are
    compared as strings.
    """
    return _cmp(fold_initial(t1.author), fold_initial(t2.author)) or _cmp(t1.year, t2.year)


def compare_year_first(t1: Thesis, t2: Thesis) -> int:
    """
    Order by year with the greatest year string first, then by author.
    """
    return _cmp(t2.year, t1.year) or _cmp(fold_initial(t1.author), fold_initial(t2.author))


@dataclass(frozen=True)
class OrderPolicy:
    """
    Pair a comparator with the navigation it needs: "band" for alphabetic
    author ranges, "year" for one anchor per distinct year.
    """
    name: str
    compare: Callable[[Thesis, Thesis], int]
    grouping: str


AUTHOR_FIRST = OrderPolicy("author", compare_author_first, "band")
YEAR_FIRST = OrderPolicy("year", compare_year_first, "year")

POLICIES: Dict[str, OrderPolicy] = {p.name: p for p in (AUTHOR_FIRST, YEAR_FIRST)}


def get_policy(name: str) -> OrderPolicy:
    try:
        return POLICIES[name]
    except KeyError:
        raise ValueError(f"Unknown sort order {name!r} (expected one of: {', '.join(POLICIES)})") from None


def sort_theses(theses: Iterable[Thesis], policy: OrderPolicy) -> List[Thesis]:
    """
    Return a new list of records sorted under the given policy.
    """
    return sorted(theses, key=functools.cmp_to_key(policy.compare))
