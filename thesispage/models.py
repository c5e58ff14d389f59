from __future__ import annotations

from dataclasses import dataclass, fields


@dataclass(frozen=True)
class Thesis:
    """
    Hold one thesis or dissertation entry exactly as it appeared in the input
    file. Values are never cleaned up or rewritten; any normalization needed
    for sorting happens on copies inside the comparators.
    """
    author: str  # "Last, First [Middle]" by convention
    year: str = ""  # kept as text, compared as text
    title: str = ""
    advisor: str = ""
    affiliation: str = ""
    degree: str = ""  # only "MS" and "PhD" are tallied
    url: str = ""  # empty when no link is available


# field names in the order they appear in the input file
FIELD_NAMES = tuple(f.name for f in fields(Thesis))
