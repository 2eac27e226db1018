from __future__ import annotations

from typing import Optional

from normref.parsing.patterns import ACT_NUMBER_RE, PARAGRAPH_BREAK_RE

# Characters scanned backwards from a citation when looking for its act.
DEFAULT_ACT_WINDOW = 200


def find_act_number(text: str, anchor: int, window: int = DEFAULT_ACT_WINDOW) -> Optional[str]:
    """Return the act number closest before ``anchor`` or None.

    Only tokens starting within ``window`` characters of the anchor count,
    and a blank line between the token and the anchor always blocks it.
    Nothing is consumed: every citation sharing the paragraph can inherit
    the same act number.
    """
    if window <= 0 or anchor <= 0:
        return None
    anchor = min(anchor, len(text))
    start = max(0, anchor - window)
    for paragraph_break in PARAGRAPH_BREAK_RE.finditer(text, start, anchor):
        start = paragraph_break.end()

    closest = None
    for match in ACT_NUMBER_RE.finditer(text, start, anchor):
        closest = match.group(0)
    return closest
