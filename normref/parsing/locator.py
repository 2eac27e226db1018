from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from normref.parsing.patterns import CITATION_RE


@dataclass(frozen=True)
class Candidate:
    """An article citation found in text, before act-number resolution.

    ``anchor`` is the offset where the citation starts: the article keyword
    for "հոդված 391", the number for the ordinal form "391-րդ հոդված".
    """

    anchor: int
    article: str
    part: Optional[str] = None
    point: Optional[str] = None


def locate_candidates(text: str) -> list[Candidate]:
    candidates: list[Candidate] = []
    for match in CITATION_RE.finditer(text):
        article = match.group("article_fwd") or match.group("article_ord")
        if not article:
            continue
        candidates.append(
            Candidate(
                anchor=match.start(),
                article=article,
                part=match.group("part_fwd") or match.group("part_ord"),
                point=match.group("point_fwd") or match.group("point_ord"),
            )
        )
    return candidates
