from __future__ import annotations

from typing import Iterable, List, NamedTuple, Sequence

from .config import (
    ALPHA_BANDS,
    BEGIN_MARKER,
    END_MARKER,
    DEGREE_MS,
    DEGREE_PHD,
    TABLE_STYLE,
    YEAR_NAV_STYLE,
)
from .models import Thesis
from .ordering import OrderPolicy, fold_initial


class DegreeCounts(NamedTuple):
    total: int
    ms: int
    phd: int


def count_degrees(theses: Iterable[Thesis]) -> DegreeCounts:
    """
    Count all records plus those whose degree is exactly "MS" or "PhD".
    Any other spelling counts towards the total only.
    """
    total = ms = phd = 0
    for t in theses:
        total += 1
        if t.degree == DEGREE_MS:
            ms += 1
        elif t.degree == DEGREE_PHD:
            phd += 1
    return DegreeCounts(total, ms, phd)


def render_entry(thesis: Thesis) -> List[str]:
    """
    Build the table for one record. Field values are written as-is, so any
    markup inside them reaches the page unchanged.
    """
    degree_row = f"    <tr><td><b>Degree:</b> {thesis.degree}</td>"
    if thesis.url:
        degree_row += f"<td align=\"right\"><a href=\"{thesis.url}\" target=\"_blank\">URL</a></td>"
    return [
        f"  <table style=\"{TABLE_STYLE}\">\n",
        f"    <tr><td><b>Author:</b> {thesis.author}</td></tr>\n",
        f"    <tr><td><b>Year:</b> {thesis.year}</td></tr>\n",
        f"    <tr><td><b>Title:</b> {thesis.title}</td></tr>\n",
        f"    <tr><td><b>Advisor:</b> {thesis.advisor}</td></tr>\n",
        f"    <tr><td><b>Affiliation:</b> {thesis.affiliation}</td></tr>\n",
        degree_row + "</tr>\n",
        "  </table><br>\n",
        "\n",
    ]


def render_band_navigation() -> List[str]:
    """
    Links to the fixed alphabetic bands, separated by "|".
    """
    lines = ["  <b>Jump to:</b>&nbsp;\n"]
    for band in ALPHA_BANDS[:-1]:
        lines.append(f"  <a href=\"#{band}\">{band}</a>&nbsp;|\n")
    lines.append(f"  <a href=\"#{ALPHA_BANDS[-1]}\">{ALPHA_BANDS[-1]}</a>\n")
    lines.append("\n")
    return lines


def distinct_years(theses: Iterable[Thesis]) -> List[str]:
    """
    Collapse runs of equal consecutive years. Equal years that are not next
    to each other stay separate entries.
    """
    years: List[str] = []
    for t in theses:
        if not years or years[-1] != t.year:
            years.append(t.year)
    return years


def render_year_navigation(theses: Sequence[Thesis]) -> List[str]:
    """
    One link per distinct year in page order, inside a fixed-width box.
    """
    years = distinct_years(theses)
    lines = [
        f"  <div style=\"{YEAR_NAV_STYLE}\">\n",
        "    <b>Jump to:</b>&nbsp;\n",
    ]
    for idx, year in enumerate(years, 1):
        sep = "|" if idx < len(years) else ""
        lines.append(f"    <a href=\"#{year}\">{year}</a>&nbsp;{sep}\n")
    lines.append("  </div>\n")
    return lines


def _year_heading(year: str) -> List[str]:
    return [
        f"  <a name={year}></a>\n",
        f"  <center><b>{year}</b></center><br>\n",
        "\n",
    ]


def _render_band_body(theses: Sequence[Thesis]) -> List[str]:
    lines: List[str] = []
    next_band = 0
    for t in theses:
        # at most one band anchor per record, bands never reached are skipped
        initial = fold_initial(t.author)[:1]
        if next_band < len(ALPHA_BANDS) and initial >= ALPHA_BANDS[next_band][0]:
            lines.append(f"  <a name={ALPHA_BANDS[next_band]}></a>\n")
            lines.append("\n")
            next_band += 1
        lines.extend(render_entry(t))
    return lines


def _render_year_body(theses: Sequence[Thesis]) -> List[str]:
    lines: List[str] = []
    previous = None
    for idx, t in enumerate(theses):
        if idx == 0 or t.year != previous:
            lines.extend(_year_heading(t.year))
            previous = t.year
        lines.extend(render_entry(t))
    return lines


def render_html(theses: Iterable[Thesis], policy: OrderPolicy) -> List[str]:
    """
    Render already sorted records as an HTML fragment and return it as a list
    of lines, each ending in a newline.

    The policy's grouping decides the navigation: "band" links to the fixed
    alphabetic ranges and drops an anchor where each range starts, "year"
    links to every distinct year and puts a heading above each year's group.
    The fragment ends with the item count and the MS/PhD tallies.
    """
    theses = list(theses)

    lines = [
        f"{BEGIN_MARKER}\n",
        "<div align=\"center\">\n",
        "\n",
    ]

    if policy.grouping == "year":
        lines.extend(render_year_navigation(theses))
    else:
        lines.extend(render_band_navigation())
    lines.append("  <br><br>\n")
    lines.append("\n")

    if policy.grouping == "year":
        lines.extend(_render_year_body(theses))
    else:
        lines.extend(_render_band_body(theses))

    counts = count_degrees(theses)
    lines.extend([
        f"  <center>Number of items: <b>{counts.total}</b></center>\n",
        f"  <center>({counts.ms} MS | {counts.phd} PhD)</center>\n",
        "\n",
        "</div>\n",
        f"{END_MARKER}\n",
    ])
    return lines
