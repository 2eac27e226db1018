from __future__ import annotations

import structlog
from fastapi import APIRouter, Depends

from normref.api.deps import require_internal_key
from normref.api.schemas import BatchExtractResponse, ExtractRequest, ExtractResponse
from normref.core.config import Settings, get_settings
from normref.core.exceptions import InputError, PayloadTooLargeError
from normref.parsing.references import extract_chunk_refs, extract_norm_refs, total_chunk_chars

logger = structlog.get_logger()

router = APIRouter()


@router.get("/health")
def health():
    return {"status": "ok"}


@router.post(
    "/extract",
    response_model=ExtractResponse | BatchExtractResponse,
    dependencies=[Depends(require_internal_key)],
)
def extract(payload: ExtractRequest, settings: Settings = Depends(get_settings)):
    if isinstance(payload.chunk_text, str):
        _check_size(len(payload.chunk_text), settings)
        refs = extract_norm_refs(payload.chunk_text, window=settings.act_number_window)
        logger.info("norm_refs_extracted", mode="single", refs=len(refs))
        return {"norm_refs": [ref.to_dict() for ref in refs]}

    if isinstance(payload.chunks, list) and all(isinstance(chunk, dict) for chunk in payload.chunks):
        _check_size(total_chunk_chars(payload.chunks), settings)
        chunks = extract_chunk_refs(payload.chunks, window=settings.act_number_window)
        logger.info(
            "norm_refs_extracted",
            mode="batch",
            chunks=len(chunks),
            refs=sum(len(chunk["norm_refs"]) for chunk in chunks),
        )
        return {"chunks": chunks}

    raise InputError("Provide chunk_text (string) or chunks (array)")


def _check_size(received: int, settings: Settings) -> None:
    if received > settings.max_input_chars:
        raise PayloadTooLargeError(settings.max_input_chars, received)
