from __future__ import annotations

from typing import Iterable, Optional

from normref.core.models import NormRef

# Unit separator: never part of a digit group or an act number.
KEY_SEPARATOR = "\x1f"


def ref_key(ref: NormRef) -> str:
    fields = (ref.article, ref.part, ref.point, ref.act_number)
    return KEY_SEPARATOR.join(value or "" for value in fields)


def dedupe_refs(refs: Iterable[NormRef]) -> list[NormRef]:
    unique: dict[str, NormRef] = {}
    for ref in refs:
        unique.setdefault(ref_key(ref), ref)
    return list(unique.values())


def _digits_key(digits: str) -> tuple[int, str]:
    # Numeric order for digit strings of any length, without int().
    significant = digits.lstrip("0")
    return len(significant), significant


def _optional_digits_key(value: Optional[str]) -> tuple[int, tuple[int, str]]:
    if value is None:
        return 0, (0, "")
    return 1, _digits_key(value)


def article_sort_key(article: str) -> tuple[tuple[int, str], str]:
    """Split "391.1" into the integer part (numeric) and the fraction digits."""
    whole, _, fraction = article.partition(".")
    return _digits_key(whole), fraction


def sort_key(ref: NormRef) -> tuple:
    return (
        article_sort_key(ref.article),
        _optional_digits_key(ref.part),
        _optional_digits_key(ref.point),
        (ref.act_number is not None, ref.act_number or ""),
        ref_key(ref),
    )


def sort_refs(refs: Iterable[NormRef]) -> tuple[NormRef, ...]:
    return tuple(sorted(refs, key=sort_key))
