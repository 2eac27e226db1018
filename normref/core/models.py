from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class NormRef:
    article: str
    part: Optional[str] = None
    point: Optional[str] = None
    act_number: Optional[str] = None

    def __post_init__(self) -> None:
        if not self.article:
            raise ValueError("article must be a non-empty string")

    def to_dict(self) -> dict[str, Optional[str]]:
        return {
            "act_number": self.act_number,
            "article": self.article,
            "part": self.part,
            "point": self.point,
        }

    def to_citation(self) -> str:
        parts = []
        if self.act_number:
            parts.append(self.act_number)
        parts.append(f"հոդված {self.article}")
        if self.part:
            parts.append(f"մաս {self.part}")
        if self.point:
            parts.append(f"կետ {self.point}")
        return ", ".join(parts)
