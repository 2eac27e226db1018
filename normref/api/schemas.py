from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel


class ExtractRequest(BaseModel):
    # Types are checked in the route; anything unusable is a 400.
    chunk_text: Optional[Any] = None
    chunks: Optional[Any] = None


class NormRefOut(BaseModel):
    act_number: Optional[str]
    article: str
    part: Optional[str]
    point: Optional[str]


class ExtractResponse(BaseModel):
    norm_refs: list[NormRefOut]


class BatchExtractResponse(BaseModel):
    chunks: list[dict[str, Any]]
