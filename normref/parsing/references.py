from __future__ import annotations

from typing import Any, Iterable, Mapping

from normref.core.models import NormRef
from normref.parsing.act_numbers import DEFAULT_ACT_WINDOW, find_act_number
from normref.parsing.locator import locate_candidates
from normref.parsing.ordering import dedupe_refs, sort_refs


def extract_norm_refs(text: str, *, window: int = DEFAULT_ACT_WINDOW) -> tuple[NormRef, ...]:
    """Extract article/part/point citations from Armenian legal text.

    The result is deduplicated and sorted by article number. An empty tuple
    means nothing was found; malformed fragments are skipped, never raised.
    """
    if not isinstance(text, str) or not text.strip():
        return ()

    refs = [
        NormRef(
            article=candidate.article,
            part=candidate.part,
            point=candidate.point,
            act_number=find_act_number(text, candidate.anchor, window),
        )
        for candidate in locate_candidates(text)
    ]
    return sort_refs(dedupe_refs(refs))


def extract_chunk_refs(
    chunks: Iterable[Mapping[str, Any]], *, window: int = DEFAULT_ACT_WINDOW
) -> list[dict[str, Any]]:
    results: list[dict[str, Any]] = []
    for chunk in chunks:
        text = chunk.get("chunk_text")
        refs = extract_norm_refs(text if isinstance(text, str) else "", window=window)
        results.append({**chunk, "norm_refs": [ref.to_dict() for ref in refs]})
    return results


def total_chunk_chars(chunks: Iterable[Mapping[str, Any]]) -> int:
    return sum(len(chunk["chunk_text"]) for chunk in chunks if isinstance(chunk.get("chunk_text"), str))
