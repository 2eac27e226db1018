from __future__ import annotations

import re

# Keyword stems with the case endings seen in court decisions and codes.
# Longer endings come first so the alternation never stops on a prefix.
ARTICLE_WORD = r"հոդված(?:ների|ներ|ից|ով|ում|ին|ի|ը|ն)?"
ARTICLE_ABBR = r"հոդվ\."
ARTICLE_KEYWORD = rf"(?:{ARTICLE_WORD}|{ARTICLE_ABBR})"

# "մասին" means "about", so the dative ending is left out for parts.
PART_KEYWORD = r"մաս(?:երի|ից|ով|ում|ի|ը|ն)?"
POINT_KEYWORD = r"կետ(?:երի|ից|ով|ում|ին|ի|ը|ն)?"

ARTICLE_NUMBER = r"[0-9]+(?:\.[0-9]+)?"
SUB_NUMBER = r"[0-9]+"

# "391-ի", "391-ից": case ending glued to a cited number
NUMBER_SUFFIX = r"(?:-[ա-և]{1,3})?"
# "391-րդ", "1-ին": ordinal marker, number comes before the keyword
ORDINAL = r"-(?:րդ|ին)"

# No blank line may sit between a keyword and its number or between qualifiers.
KEYWORD_GAP = r"[^\S\n]*(?:\n[^\S\n]*)?"
CLAUSE_GAP = r"(?:[,\-]|[^\S\n]|\n(?![^\S\n]*\n))*"

ACT_NUMBER = r"(?<!\w)[Ա-Ֆ]{1,4}-[0-9]{1,6}-[Ա-Ֆ]{1,3}(?![Ա-Ֆ0-9])"

PARAGRAPH_BREAK = r"\n[^\S\n]*\n"

ARTICLE_KEYWORD_RE = re.compile(ARTICLE_KEYWORD, re.IGNORECASE)
PART_KEYWORD_RE = re.compile(PART_KEYWORD, re.IGNORECASE)
POINT_KEYWORD_RE = re.compile(POINT_KEYWORD, re.IGNORECASE)
ACT_NUMBER_RE = re.compile(ACT_NUMBER)
PARAGRAPH_BREAK_RE = re.compile(PARAGRAPH_BREAK)


def _qualifier(keyword: str, name: str) -> str:
    forward = rf"{keyword}{KEYWORD_GAP}(?P<{name}_fwd>{SUB_NUMBER}){NUMBER_SUFFIX}"
    ordinal = rf"(?P<{name}_ord>{SUB_NUMBER}){ORDINAL}{KEYWORD_GAP}{keyword}(?!\w)"
    return rf"(?:{CLAUSE_GAP}(?:{forward}|{ordinal}))?"


# An ordinal article followed by its own "keyword number" yields to that
# citation; "391-րդ հոդվածի 1-ին մասի" stays ordinal.
CITATION_RE = re.compile(
    r"(?:"
    rf"(?<!\w){ARTICLE_KEYWORD}{KEYWORD_GAP}(?P<article_fwd>{ARTICLE_NUMBER}){NUMBER_SUFFIX}"
    r"|"
    rf"(?<![\w.\-])(?P<article_ord>{ARTICLE_NUMBER}){ORDINAL}{KEYWORD_GAP}{ARTICLE_WORD}(?!\w)"
    rf"(?!{KEYWORD_GAP}{ARTICLE_NUMBER}(?![0-9]|\.[0-9]|{ORDINAL}))"
    r")"
    + _qualifier(PART_KEYWORD, "part")
    + _qualifier(POINT_KEYWORD, "point"),
    re.IGNORECASE,
)


def is_article_keyword(token: str) -> bool:
    return ARTICLE_KEYWORD_RE.fullmatch(token) is not None


def is_part_keyword(token: str) -> bool:
    return PART_KEYWORD_RE.fullmatch(token) is not None


def is_point_keyword(token: str) -> bool:
    return POINT_KEYWORD_RE.fullmatch(token) is not None


def looks_like_act_number(token: str) -> bool:
    """True for act designations such as "ՀՕ-528-Ն"."""
    return ACT_NUMBER_RE.fullmatch(token) is not None
